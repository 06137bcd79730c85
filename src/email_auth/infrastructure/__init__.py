"""Infrastructure layer - Identity provider transports"""

from .strapi_provider import StrapiProvider

__all__ = ["StrapiProvider"]
