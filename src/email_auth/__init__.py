"""Email/password login against a Strapi identity provider"""

__version__ = "1.0.0"
