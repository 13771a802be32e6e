"""Django project package for the commission tracker backend."""
