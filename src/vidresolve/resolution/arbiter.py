"""Deterministic selection among successful candidates."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import ClassVar

from vidresolve.core.models import ResolutionCandidate
from vidresolve.core.types import ProviderName, QualityTier

logger = logging.getLogger(__name__)


class QualityArbiter:
    """
    Picks one candidate by quality, then by provider preference.

    Candidates are sorted by quality (high first), ties broken by
    PROVIDER_PREFERENCE. Providers missing from that list sort after all
    listed ones, by name. A preferred quality other than high is a soft
    preference: the first sorted candidate with exactly that quality
    wins, otherwise the top of the sort.
    """

    PROVIDER_PREFERENCE: ClassVar[tuple[str, ...]] = (
        ProviderName.SNAPTIK,
        ProviderName.TIKWM,
        ProviderName.TIKDOWN,
        ProviderName.SAVETT,
        ProviderName.WEBSCRAPING,
    )

    def __init__(self, provider_preference: Sequence[str] | None = None) -> None:
        preference = (
            provider_preference if provider_preference is not None else self.PROVIDER_PREFERENCE
        )
        self._positions = {str(name): index for index, name in enumerate(preference)}

    def _sort_key(self, candidate: ResolutionCandidate) -> tuple[int, int, str]:
        position = self._positions.get(candidate.provider, len(self._positions))
        return (-candidate.quality.rank, position, candidate.provider)

    def rank(self, candidates: Sequence[ResolutionCandidate]) -> list[ResolutionCandidate]:
        """Return candidates best-first."""
        return sorted(candidates, key=self._sort_key)

    def select_best(
        self,
        candidates: Sequence[ResolutionCandidate],
        preferred_quality: QualityTier = QualityTier.HIGH,
    ) -> ResolutionCandidate:
        """Select exactly one winner. Candidates must be non-empty."""
        if not candidates:
            raise ValueError("Cannot select from an empty candidate set")

        ranked = self.rank(candidates)
        selected = ranked[0]

        if preferred_quality != QualityTier.HIGH:
            selected = next(
                (c for c in ranked if c.quality == preferred_quality),
                selected,
            )

        logger.debug(
            f"Selected source: {selected.provider} with quality: {selected.quality.value}"
        )
        return selected
