from __future__ import annotations
import logging
from typing import Any, Mapping, Optional

from .engine import Sanitizer
from .errors import UnknownProfileError
from .registry import FilterRegistry, as_filter_fn, compile_filters_registry


class SanitizerFactory:
    """
    Owns a filter catalog and named rule profiles, and builds Sanitizers from them.

    The engine never registers filters itself; this is where custom ones are added:

        factory = SanitizerFactory()
        factory.extend("shout", lambda v, opts: v.upper() + "!")
        factory.make({"title": " hello "}, {"title": "trim|shout"}).sanitize()
        # {"title": "HELLO!"}
    """

    def __init__(
        self,
        filters: Optional[Mapping[str, Any]] = None,
        *,
        profiles: Optional[Mapping[str, Mapping[str, Any]]] = None,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self._filters: dict[str, Any] = dict(compile_filters_registry() if filters is None else filters)
        self._profiles: dict[str, dict[str, Any]] = {k: dict(v) for k, v in (profiles or {}).items()}
        self._log = logger
        self._registry: Optional[FilterRegistry] = None

    @classmethod
    def from_config(cls, cfg, filters: Optional[Mapping[str, Any]] = None) -> "SanitizerFactory":
        """Wire profiles and a logger from a RootCfg (or anything shaped like one)."""
        from ..utils.log import get_logger

        log_cfg = getattr(cfg, "logging", None)
        log = get_logger(
            "sanitizer",
            getattr(log_cfg, "level", "INFO"),
            getattr(log_cfg, "structured_json", True),
        )
        profiles = getattr(cfg, "profiles", {}) or {}
        log.info("sanitizer factory ready", extra={"profiles": sorted(profiles)})
        return cls(filters, profiles=profiles, logger=log)

    # ---- catalog ----

    def extend(self, name: str, filter: Any) -> "SanitizerFactory":
        """Add or replace a filter. Fails fast on objects that can't be called."""
        as_filter_fn(filter, name)
        self._filters[name] = filter
        self._registry = None
        if self._log is not None:
            self._log.debug("registered filter %r", name, extra={"filter": name})
        return self

    @property
    def filter_names(self) -> list[str]:
        return sorted(self._filters)

    @property
    def profile_names(self) -> list[str]:
        return sorted(self._profiles)

    def registry(self) -> FilterRegistry:
        # snapshot; later extend() calls don't leak into Sanitizers already built
        if self._registry is None:
            self._registry = FilterRegistry(self._filters)
        return self._registry

    # ---- building ----

    def make(self, data: Mapping[str, Any], rules: Mapping[str, Any]) -> Sanitizer:
        return Sanitizer(data, rules, self.registry(), logger=self._log)

    def make_for(self, profile: str, data: Mapping[str, Any]) -> Sanitizer:
        if profile not in self._profiles:
            raise UnknownProfileError(profile)
        return self.make(data, self._profiles[profile])
