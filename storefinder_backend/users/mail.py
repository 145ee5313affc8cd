# users/mail.py

"""
OUTBOUND MAIL

send() renders templates/email/<filename>.html with the given context, derives
a plain-text alternative from it and hands both to Django's configured email
backend (EMAIL_URL). Transport failures propagate to the caller.
"""

from __future__ import annotations

import logging

from django.conf import settings
from django.core.mail import EmailMultiAlternatives
from django.template.loader import render_to_string
from django.utils.html import strip_tags

logger = logging.getLogger(__name__)


def generate_html(filename: str, **context) -> str:
    return render_to_string(f"email/{filename}.html", context)


def send(*, user, subject: str, filename: str, **context) -> int:
    html = generate_html(filename, user=user, subject=subject, **context)
    text = strip_tags(html).strip()

    message = EmailMultiAlternatives(
        subject=subject,
        body=text,
        from_email=settings.DEFAULT_FROM_EMAIL,
        to=[user.email],
    )
    message.attach_alternative(html, "text/html")

    sent = message.send()
    logger.info(
        "Mail sent",
        extra={"template": filename, "to": user.email, "subject": subject},
    )
    return sent
