"""Provider adapters for third-party video resolution services."""

from vidresolve.resolution.providers.dlpanda import DlpandaAdapter
from vidresolve.resolution.providers.savett import SaveTTAdapter
from vidresolve.resolution.providers.snaptik import SnaptikAdapter
from vidresolve.resolution.providers.ssstik import SsstikAdapter
from vidresolve.resolution.providers.tikdown import TikdownAdapter
from vidresolve.resolution.providers.tikwm import TikwmAdapter
from vidresolve.resolution.providers.webscraping import WebScrapingAdapter

__all__ = [
    "DlpandaAdapter",
    "SaveTTAdapter",
    "SnaptikAdapter",
    "SsstikAdapter",
    "TikdownAdapter",
    "TikwmAdapter",
    "WebScrapingAdapter",
]
