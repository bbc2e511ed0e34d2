# outlets/models/brand.py

import uuid

from django.core.exceptions import ValidationError
from django.db import models
from django.utils.text import slugify


class Brand(models.Model):
    """
    A restaurant brand (tenant root). Owns one or more outlets.
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)

    name = models.CharField(max_length=255, unique=True)
    slug = models.SlugField(max_length=100, unique=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["name"]

    def __str__(self):
        return self.name

    def clean(self):
        self.name = (self.name or "").strip()
        if not self.name:
            raise ValidationError("Brand name is required")

    def save(self, *args, **kwargs):
        # Slug must exist before field validation runs.
        if not (self.slug or "").strip():
            self.slug = slugify((self.name or "").strip())[:100]

        self.full_clean()
        return super().save(*args, **kwargs)
