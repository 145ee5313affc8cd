from django import forms

from reviews.models import RATING_MAX, RATING_MIN, Review


class ReviewForm(forms.ModelForm):
    rating = forms.TypedChoiceField(
        choices=[(i, str(i)) for i in range(RATING_MAX, RATING_MIN - 1, -1)],
        coerce=int,
        widget=forms.RadioSelect,
    )

    class Meta:
        model = Review
        fields = ["text", "rating"]
        labels = {"text": "Did you try this place? Have something to say? Leave a review..."}
