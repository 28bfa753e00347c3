"""The ``stats`` console command."""

from __future__ import annotations

from typing import TYPE_CHECKING

from hitstats._meta import logger
from hitstats.model.filters import entry_predicate
from hitstats.model.report import StatsReport, rank_entries
from hitstats.model.threshold import (
    AdaptiveThreshold,
    FixedThreshold,
    ThresholdSpec,
    is_threshold_token,
    parse_threshold,
    resolve_threshold,
)
from hitstats.render.text import emit, render_lines

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence

    from hitstats.store import StatsStore

_MAX_ARGS = 2


def split_args(args: Sequence[str]) -> tuple[ThresholdSpec | None, str | None]:
    """Split console arguments into ``(threshold, pattern)``.

    Accepted forms: no argument, ``THRESHOLD``, ``PATTERN`` and
    ``THRESHOLD PATTERN``. A lone argument that is neither an integer nor
    ``auto`` is a pattern; other integers must be valid thresholds.
    Parts that were not given are ``None``.
    """
    if len(args) > _MAX_ARGS:
        msg = f"expected at most {_MAX_ARGS} arguments, got {len(args)}"
        raise ValueError(msg)
    if not args:
        return None, None
    if len(args) == 1:
        if not is_threshold_token(args[0]):
            return None, args[0]
        return parse_threshold(args[0]), None
    return parse_threshold(args[0]), args[1]


class StatsCommand:
    """Report the counters of a stats store that pass a threshold and a name pattern.

    Parameters
    ----------
    threshold:
        Inclusive minimum counter value. ``-1``, ``"auto"`` or
        :class:`AdaptiveThreshold` derive it from the store on execution.
    pattern:
        Case-sensitive substring counter names must contain; empty matches all.
    remember_adaptive:
        When ``True`` the first adaptive derivation replaces the configured
        specifier, so later executions reuse that value. When ``False``
        every execution derives the threshold again.
    color:
        Emphasize the threshold and pattern with ANSI bold.
    """

    def __init__(
        self,
        threshold: int | str | ThresholdSpec = 0,
        pattern: str = "",
        *,
        remember_adaptive: bool = True,
        color: bool = False,
    ) -> None:
        self.threshold: ThresholdSpec = parse_threshold(threshold)
        self.pattern = pattern
        self.remember_adaptive = remember_adaptive
        self.color = color

    @classmethod
    def from_args(cls, *args: str, **kwargs: bool) -> StatsCommand:
        """Build a command from console arguments (see :func:`split_args`)."""
        threshold, pattern = split_args(args)
        return cls(
            threshold if threshold is not None else 0,
            pattern if pattern is not None else "",
            **kwargs,
        )

    @property
    def is_adaptive(self) -> bool:
        return isinstance(self.threshold, AdaptiveThreshold)

    def reset(self, threshold: int | str | ThresholdSpec) -> None:
        """Replace the configured threshold, e.g. to re-enable adaptive mode."""
        self.threshold = parse_threshold(threshold)

    def _effective_threshold(self, *, count: int, total: int) -> FixedThreshold:
        effective = resolve_threshold(self.threshold, count=count, total=total)
        if self.is_adaptive:
            logger.debug("adaptive threshold %d from %d records (sum %d)", effective.value, count, total)
            if self.remember_adaptive:
                self.threshold = effective
        return effective

    def build_report(self, store: StatsStore) -> StatsReport:
        # two separate queries: the store may change in between
        count = store.count_records()
        total = store.sum_records()
        threshold = self._effective_threshold(count=count, total=total).value

        stats = store.fetch_stats(entry_predicate(threshold, self.pattern))
        logger.debug("%d of %d records passed filtering", len(stats), count)

        return StatsReport(
            count=count,
            total=total,
            threshold=threshold,
            pattern=self.pattern,
            entries=rank_entries(stats),
        )

    def render(self, store: StatsStore) -> list[str]:
        return render_lines(self.build_report(store), color=self.color)

    def execute(self, store: StatsStore, sink: Callable[[str], object] | None = None) -> bool:
        """Render the report for *store* into *sink* (the package logger by default)."""
        emit(self.render(store), sink if sink is not None else logger.info)
        return True

    def __repr__(self) -> str:
        return f"{type(self).__name__}(threshold={self.threshold}, pattern={self.pattern!r})"


__all__ = ["StatsCommand", "split_args"]
