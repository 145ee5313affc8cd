from django import forms

from stores.models import Store
from stores.services.photos import ALLOWED_EXTENSIONS

TAG_CHOICES = [
    ("Wifi", "Wifi"),
    ("Open Late", "Open Late"),
    ("Family Friendly", "Family Friendly"),
    ("Vegetarian", "Vegetarian"),
    ("Licensed", "Licensed"),
]


class StoreForm(forms.ModelForm):
    tags = forms.MultipleChoiceField(
        choices=TAG_CHOICES,
        required=False,
        widget=forms.CheckboxSelectMultiple,
    )
    photo = forms.FileField(required=False)

    class Meta:
        model = Store
        fields = ["name", "description", "address", "longitude", "latitude"]
        labels = {
            "longitude": "Address Lng",
            "latitude": "Address Lat",
        }

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        if self.instance.pk and not self.is_bound:
            self.initial["tags"] = self.instance.tags

    def clean_name(self):
        name = self.cleaned_data["name"].strip()
        if not name:
            raise forms.ValidationError("Please enter a store name!")
        return name

    def clean_photo(self):
        upload = self.cleaned_data.get("photo")
        if upload and (getattr(upload, "content_type", "") or "").lower() not in ALLOWED_EXTENSIONS:
            raise forms.ValidationError("That filetype isn't allowed!")
        return upload
