# stores/tests/test_store_model.py

from django.test import TestCase

from stores.models import Store, StoreTag
from stores.services import search, slugs
from stores.services.exceptions import InvalidCoordinatesError
from stores.tests.factories import HAMILTON_LAT, HAMILTON_LNG, make_review, make_store, make_user


class StoreSlugTests(TestCase):
    """
    Slug derivation.

    GUARANTEES:
    - slug = slugify(name), lowercased, punctuation stripped
    - duplicates get "-<count + 1>" over the "base" / "base-N" family
    - slug only changes when the name changes
    - a taken suffix (after deletions) is skipped, never duplicated
    """

    def setUp(self):
        self.author = make_user()

    def test_slug_is_derived_from_name(self):
        store = make_store(self.author, name="Joe's Café!")

        self.assertEqual(store.slug, "joes-cafe")

    def test_name_is_trimmed_before_slugging(self):
        store = make_store(self.author, name="  Corner Shop  ")

        self.assertEqual(store.name, "Corner Shop")
        self.assertEqual(store.slug, "corner-shop")

    def test_duplicate_names_get_numbered_suffixes(self):
        first = make_store(self.author, name="Coffee")
        second = make_store(self.author, name="Coffee")
        third = make_store(self.author, name="coffee")

        self.assertEqual(first.slug, "coffee")
        self.assertEqual(second.slug, "coffee-2")
        self.assertEqual(third.slug, "coffee-3")

    def test_family_ignores_longer_slugs_with_same_prefix(self):
        make_store(self.author, name="Coffee Shop")

        store = make_store(self.author, name="Coffee")

        self.assertEqual(store.slug, "coffee")

    def test_family_match_is_case_insensitive(self):
        other = make_store(self.author, name="Coffee")
        Store.objects.filter(pk=other.pk).update(slug="COFFEE-7")

        store = make_store(self.author, name="Coffee")

        self.assertEqual(store.slug, "coffee-2")

    def test_symbol_only_name_falls_back(self):
        store = make_store(self.author, name="!!!")

        self.assertEqual(store.slug, slugs.FALLBACK_SLUG)

    def test_slug_kept_when_other_fields_change(self):
        store = make_store(self.author, name="Pizza Place")
        make_store(self.author, name="Pizza Place")

        store = Store.objects.get(pk=store.pk)
        store.description = "Now with gluten-free crust"
        store.save()

        store.refresh_from_db()
        self.assertEqual(store.slug, "pizza-place")

    def test_slug_recomputed_on_rename(self):
        store = make_store(self.author, name="Pizza Place")

        store = Store.objects.get(pk=store.pk)
        store.name = "Pasta Place"
        store.save()

        store.refresh_from_db()
        self.assertEqual(store.slug, "pasta-place")

    def test_collision_after_deletion_skips_taken_suffix(self):
        first = make_store(self.author, name="Pizza")
        second = make_store(self.author, name="Pizza")
        self.assertEqual(second.slug, "pizza-2")
        first.delete()

        # family count is 1 again, so the first guess is the taken "pizza-2"
        third = make_store(self.author, name="Pizza")

        self.assertEqual(third.slug, "pizza-3")
        self.assertEqual(Store.objects.filter(slug__startswith="pizza").count(), 2)

    def test_slug_regex_escapes_base(self):
        pattern = slugs.slug_family_regex("a.b")

        self.assertEqual(pattern, r"^a\.b(-[0-9]*)?$")


class StoreTagTests(TestCase):
    def test_tags_keep_submission_order(self):
        store = make_store(tags=["Wifi", "Open Late", "Family Friendly"])

        store = Store.objects.with_tags().get(pk=store.pk)
        self.assertEqual(store.tags, ["Wifi", "Open Late", "Family Friendly"])

    def test_set_tags_replaces_and_dedupes(self):
        store = make_store(tags=["Wifi", "Licensed"])

        store.set_tags(["Licensed", "Vegetarian", "Licensed", " "])

        self.assertEqual(store.tags, ["Licensed", "Vegetarian"])
        self.assertEqual(StoreTag.objects.filter(store=store).count(), 2)

    def test_tags_list_counts_and_orders(self):
        make_store(tags=["Wifi", "Open Late"])
        make_store(tags=["Wifi", "Licensed"])
        make_store(tags=["Wifi", "Open Late"])
        make_store()

        self.assertEqual(
            Store.objects.tags_list(),
            [
                {"tag": "Wifi", "count": 3},
                {"tag": "Open Late", "count": 2},
                {"tag": "Licensed", "count": 1},
            ],
        )

    def test_tags_list_empty(self):
        self.assertEqual(Store.objects.tags_list(), [])

    def test_tagged_filter(self):
        wifi = make_store(name="A", tags=["Wifi"])
        make_store(name="B", tags=["Licensed"])

        self.assertEqual(list(Store.objects.tagged("Wifi")), [wifi])


class TopStoresTests(TestCase):
    """
    GUARANTEES:
    - only stores with >= 2 reviews
    - sorted by mean rating, best first
    - at most 10 rows
    """

    def test_requires_two_reviews(self):
        one = make_store(name="One Review")
        make_review(one, 5)
        two = make_store(name="Two Reviews")
        make_review(two, 3)
        make_review(two, 4)

        top = list(Store.objects.top_stores())

        self.assertEqual([s.name for s in top], ["Two Reviews"])
        self.assertEqual(top[0].review_count, 2)
        self.assertAlmostEqual(top[0].average_rating, 3.5)

    def test_sorted_by_average_and_limited_to_ten(self):
        for i in range(12):
            store = make_store(name=f"Store {i:02d}")
            make_review(store, 1 + i % 5)
            make_review(store, 1 + (i + 1) % 5)

        top = list(Store.objects.top_stores())

        self.assertEqual(len(top), 10)
        averages = [s.average_rating for s in top]
        self.assertEqual(averages, sorted(averages, reverse=True))

    def test_no_reviews_means_no_rows(self):
        make_store()

        self.assertEqual(list(Store.objects.top_stores()), [])


class StoreReviewLoadingTests(TestCase):
    def setUp(self):
        self.store = make_store(name="Reviewed")
        make_review(self.store, 4, text="first")
        make_review(self.store, 5, text="second")

    def test_default_query_does_not_load_reviews(self):
        store = Store.objects.get(pk=self.store.pk)

        self.assertNotIn("reviews", getattr(store, "_prefetched_objects_cache", {}))

    def test_with_reviews_loads_reviews_and_authors_up_front(self):
        with self.assertNumQueries(2):
            stores = list(Store.objects.with_reviews())
            authors = [r.author.name for s in stores for r in s.reviews.all()]

        self.assertEqual(len(authors), 2)

    def test_visible_with_reviews(self):
        store = Store.objects.visible(include_reviews=True).get(pk=self.store.pk)

        with self.assertNumQueries(0):
            texts = [r.text for r in store.reviews.all()]
            store.tags
            store.author.name

        self.assertEqual(sorted(texts), ["first", "second"])


class StoreNearTests(TestCase):
    def setUp(self):
        self.bakery = make_store(name="Bakery", lng=HAMILTON_LNG, lat=HAMILTON_LAT)
        self.noodles = make_store(name="Noodles", lng=-79.8687, lat=43.2601)
        self.cafe = make_store(name="Cafe", lng=-79.8861, lat=43.2559)
        self.toronto = make_store(name="Toronto", lng=-79.3832, lat=43.6532)

    def test_nearest_first_within_default_radius(self):
        found = Store.objects.near(HAMILTON_LNG, HAMILTON_LAT)

        self.assertEqual([s.name for s in found], ["Bakery", "Noodles", "Cafe"])
        self.assertAlmostEqual(found[0].distance, 0.0, places=3)
        distances = [s.distance for s in found]
        self.assertEqual(distances, sorted(distances))

    def test_max_distance(self):
        found = Store.objects.near(HAMILTON_LNG, HAMILTON_LAT, max_distance=1000)

        self.assertEqual([s.name for s in found], ["Bakery", "Noodles"])

    def test_string_coordinates_are_accepted(self):
        found = Store.objects.near(str(HAMILTON_LNG), str(HAMILTON_LAT))

        self.assertEqual(found[0].name, "Bakery")

    def test_invalid_coordinates(self):
        with self.assertRaises(InvalidCoordinatesError):
            Store.objects.near("abc", HAMILTON_LAT)
        with self.assertRaises(InvalidCoordinatesError):
            Store.objects.near(HAMILTON_LNG, 91)
        with self.assertRaises(InvalidCoordinatesError):
            Store.objects.near(None, None)


class StoreSearchTests(TestCase):
    def test_matches_name_or_description(self):
        make_store(name="Bean There", description="coffee and cake")
        make_store(name="Coffee Corner")
        make_store(name="Tea House")

        names = [s.name for s in Store.objects.search("coffee")]

        self.assertEqual(names, ["Bean There", "Coffee Corner"])

    def test_limited_to_five(self):
        for i in range(7):
            make_store(name=f"Pizza {i}")

        self.assertEqual(len(Store.objects.search("pizza")), 5)

    def test_blank_query_returns_nothing(self):
        make_store(name="Anything")

        self.assertEqual(list(Store.objects.search("   ")), [])

    def test_any_term_matches(self):
        make_store(name="Coffee", description="free wifi all day")
        make_store(name="Tea House", description="loose leaf")

        names = [s.name for s in Store.objects.search("wifi coffee")]

        self.assertEqual(names, ["Coffee"])

    def test_multi_word_query_matches_stores_with_either_term(self):
        make_store(name="Noodle Bar")
        make_store(name="Taco Stand")
        make_store(name="Shoe Shop")

        names = {s.name for s in Store.objects.search("noodle taco")}

        self.assertEqual(names, {"Noodle Bar", "Taco Stand"})

    def test_ranked_by_relevance_not_name(self):
        make_store(name="Aardvark Books", description="there is coffee")
        make_store(name="Coffee Coffee", description="coffee, more coffee")

        results = list(Store.objects.search("coffee"))

        self.assertEqual([s.name for s in results], ["Coffee Coffee", "Aardvark Books"])
        self.assertEqual([s.rank for s in results], [4, 1])

    def test_search_is_case_insensitive(self):
        make_store(name="BAKERY Bonjour")

        self.assertEqual([s.name for s in Store.objects.search("bakery")], ["BAKERY Bonjour"])

    def test_search_terms_are_lowercased_and_deduped(self):
        self.assertEqual(search.search_terms("  Wifi wifi  COFFEE "), ["wifi", "coffee"])
        self.assertEqual(search.search_terms(""), [])


class StoreLocationTests(TestCase):
    def test_location_shape(self):
        store = make_store(address="12 Queen St W")

        self.assertEqual(
            store.location,
            {
                "type": "Point",
                "coordinates": [HAMILTON_LNG, HAMILTON_LAT],
                "address": "12 Queen St W",
            },
        )
