"""Provider registry for managing adapter instances."""

from __future__ import annotations

from typing import TYPE_CHECKING

from vidresolve.resolution.base import AbstractProviderAdapter

if TYPE_CHECKING:
    from vidresolve.transport.retry import RetryingTransport


class ProviderRegistry:
    """
    Ordered collection of provider adapters.

    Registration order is the fan-out launch order. It carries no
    ranking meaning; arbitration has its own preference list.
    """

    def __init__(self) -> None:
        self._adapters: list[AbstractProviderAdapter] = []

    def register(self, adapter: AbstractProviderAdapter) -> None:
        """Register an adapter. Names must be unique."""
        if any(existing.name == adapter.name for existing in self._adapters):
            raise ValueError(f"Provider already registered: {adapter.name}")
        self._adapters.append(adapter)

    @property
    def adapters(self) -> list[AbstractProviderAdapter]:
        return list(self._adapters)

    @property
    def names(self) -> list[str]:
        return [adapter.name for adapter in self._adapters]

    def __len__(self) -> int:
        return len(self._adapters)

    @classmethod
    def with_defaults(cls, transport: "RetryingTransport") -> "ProviderRegistry":
        """Create a registry with every shipped adapter sharing one transport."""
        from vidresolve.resolution.providers import (
            DlpandaAdapter,
            SaveTTAdapter,
            SnaptikAdapter,
            SsstikAdapter,
            TikdownAdapter,
            TikwmAdapter,
            WebScrapingAdapter,
        )

        registry = cls()
        for adapter_cls in (
            SnaptikAdapter,
            TikwmAdapter,
            TikdownAdapter,
            SaveTTAdapter,
            SsstikAdapter,
            DlpandaAdapter,
            WebScrapingAdapter,
        ):
            registry.register(adapter_cls(transport))
        return registry
