from django import forms
from django.contrib.auth import get_user_model
from django.contrib.auth.forms import AuthenticationForm

User = get_user_model()


# ---------------- LOGIN ----------------
class LoginForm(AuthenticationForm):
    """Email + password; the "username" field carries the email."""

    username = forms.EmailField(
        label="Email",
        widget=forms.EmailInput(attrs={"autofocus": True}),
    )


# ---------------- REGISTER ----------------
class RegisterForm(forms.Form):
    name = forms.CharField(max_length=150)
    email = forms.EmailField()
    password = forms.CharField(widget=forms.PasswordInput)

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        # Field name is not a valid identifier, so it cannot be declared above
        self.fields["password-confirm"] = forms.CharField(
            label="Confirm Password",
            widget=forms.PasswordInput,
        )

    def clean_name(self):
        name = self.cleaned_data["name"].strip()
        if not name:
            raise forms.ValidationError("You must supply a name!")
        return name

    def clean_email(self):
        email = User.objects.normalize_email(self.cleaned_data["email"].strip())
        if User.objects.filter(email__iexact=email).exists():
            raise forms.ValidationError("An account with that email already exists.")
        return email

    def clean(self):
        cleaned = super().clean()
        password = cleaned.get("password")
        confirm = cleaned.get("password-confirm")
        if password and confirm is not None and password != confirm:
            raise forms.ValidationError("Oops! Your passwords do not match")
        return cleaned

    def save(self):
        return User.objects.create_user(
            email=self.cleaned_data["email"],
            password=self.cleaned_data["password"],
            name=self.cleaned_data["name"],
        )


# ---------------- FORGOT PASSWORD ----------------
class ForgotPasswordForm(forms.Form):
    email = forms.EmailField()


# ---------------- ACCOUNT ----------------
class AccountForm(forms.ModelForm):
    class Meta:
        model = User
        fields = ["name", "email"]

    def clean_email(self):
        email = User.objects.normalize_email(self.cleaned_data["email"].strip())
        taken = (
            User.objects.filter(email__iexact=email)
            .exclude(pk=self.instance.pk)
            .exists()
        )
        if taken:
            raise forms.ValidationError("An account with that email already exists.")
        return email
