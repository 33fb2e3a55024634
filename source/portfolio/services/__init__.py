"""This module initializes the services package.

It also re-exports the services to provide a simpler, flatter import
structure for other parts of the application.
"""

from portfolio.services.build import StaticSiteBuilder
from portfolio.services.fragments import FragmentLoader
from portfolio.services.navigation import NavigationHelper
from portfolio.services.site import SiteService
from portfolio.services.translation import TranslationApplier

__all__ = [
    "FragmentLoader",
    "NavigationHelper",
    "SiteService",
    "StaticSiteBuilder",
    "TranslationApplier",
]
