"""
Database models for the medication tracker.

The ownership chain is User -> Profile -> Medication.  Every profile
belongs to exactly one user and every medication to exactly one profile;
neither reference changes after creation.
"""
from __future__ import annotations

from django.contrib.auth.models import AbstractUser, BaseUserManager
from django.db import models


class UserManager(BaseUserManager):
    """Manager for email-identified users."""

    use_in_migrations = True

    def _create_user(self, email, password, **extra_fields):
        if not email:
            raise ValueError('email is required')
        email = self.normalize_email(email).lower()
        user = self.model(email=email, **extra_fields)
        user.set_password(password)
        user.save(using=self._db)
        return user

    def create_user(self, email, password=None, **extra_fields):
        extra_fields.setdefault('is_staff', False)
        extra_fields.setdefault('is_superuser', False)
        return self._create_user(email, password, **extra_fields)

    def create_superuser(self, email, password=None, **extra_fields):
        extra_fields.setdefault('is_staff', True)
        extra_fields.setdefault('is_superuser', True)
        if not extra_fields.get('is_staff') or not extra_fields.get('is_superuser'):
            raise ValueError('superuser must have is_staff=True and is_superuser=True')
        return self._create_user(email, password, **extra_fields)


class User(AbstractUser):
    """Account holder, identified by email.

    ``password`` holds the salted hash produced by Django's hashers; the
    plaintext is never stored.
    """
    username = None
    first_name = None
    last_name = None
    email = models.EmailField(unique=True)
    name = models.CharField(max_length=150, blank=True, null=True)
    created_at = models.DateTimeField(auto_now_add=True)

    USERNAME_FIELD = 'email'
    REQUIRED_FIELDS: list[str] = []

    objects = UserManager()

    def __str__(self) -> str:
        return self.email


class Profile(models.Model):
    """A tracked individual (e.g. a patient or dependent) owned by one user."""
    user = models.ForeignKey(User, on_delete=models.CASCADE, related_name='profiles')
    name = models.CharField(max_length=255)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ['created_at', 'id']

    def __str__(self) -> str:
        return f"{self.name} (#{self.id})"


class Medication(models.Model):
    """A medication with stock state, owned by one profile.

    ``current_stock`` is a ``PositiveIntegerField`` so the database rejects
    negative values with a CHECK constraint.  ``low_stock_threshold`` only
    feeds the low-stock signal.
    """
    DEFAULT_LOW_STOCK_THRESHOLD = 5
    # upper bound of PositiveIntegerField on every supported backend
    MAX_STOCK = 2147483647

    profile = models.ForeignKey(Profile, on_delete=models.CASCADE, related_name='medications')
    name = models.CharField(max_length=255)
    dosage = models.CharField(max_length=120, blank=True, null=True)
    current_stock = models.PositiveIntegerField(default=0)
    low_stock_threshold = models.PositiveIntegerField(default=DEFAULT_LOW_STOCK_THRESHOLD)
    take_time = models.CharField(max_length=64, blank=True, null=True)
    frequency = models.CharField(max_length=120, blank=True, null=True)
    notes = models.TextField(blank=True, null=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ['name', 'id']

    def __str__(self) -> str:
        return f"{self.name} ({self.current_stock} left)"
