"""Django project package for the medication tracker backend."""
