"""Link options and ContextVar-based default configuration for autolink.

LinkOptions is an immutable record read by every stage of a transform.
A default can be installed per thread/task via ContextVars (PEP 567), so
applications can configure autolink once and call auto_link() without
threading options through every call site.

Thread Safety:
    LinkOptions is frozen. ContextVars are thread-local by design: each
    thread has independent storage, so no locks are needed.

Usage:
    # Explicit options
    from autolink import LinkOptions, auto_link
    auto_link(text, LinkOptions(target="_blank", rel="noreferrer"))

    # Context default
    from autolink.config import link_options_context
    with link_options_context(LinkOptions(rel="nofollow")):
        html = auto_link(text)

"""

import dataclasses
import re
from collections.abc import Callable, Iterable, Iterator, Mapping
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass
from typing import Any

from autolink.errors import InvalidInputError

LinkCallback = Callable[[str], str | None]

DEFAULT_SCHEMES: tuple[str, ...] = ("http", "https", "ftp")

DEFAULT_SKIP_TAGS: frozenset[str] = frozenset({"a"})

_SCHEME_RE = re.compile(r"^[a-z][a-z0-9+.\-]*$")

_ATTRIBUTE_NAME_RE = re.compile(r"^[A-Za-z_:][A-Za-z0-9_:.\-]*$")

_TAG_NAME_RE = re.compile(r"^[a-z][a-z0-9:\-]*$")

# Emitted by the default renderer itself, or owned by a dedicated field
_RESERVED_ATTRIBUTES = frozenset({"href", "target", "rel"})


@dataclass(frozen=True, slots=True)
class LinkOptions:
    """Immutable link configuration.

    Frozen dataclass ensures thread-safety (immutable after creation).
    Values are validated and normalized on construction; invalid options
    raise InvalidInputError instead of being coerced.

    Attributes:
        target: Value of a target attribute on default-rendered anchors
        rel: Value of a rel attribute on default-rendered anchors
        callback: Per-URL override. Returns replacement markup, or None to
            fall back to default rendering for that URL
        attributes: Extra (name, value) attributes, emitted after target
            and rel. A mapping is accepted and converted in insertion order
        schemes: URL schemes recognized by the scanner (case-insensitive)
        skip_tags: Elements whose content is never linked

    """

    target: str | None = None
    rel: str | None = None
    callback: LinkCallback | None = None
    attributes: tuple[tuple[str, str], ...] = ()
    schemes: tuple[str, ...] = DEFAULT_SCHEMES
    skip_tags: frozenset[str] = DEFAULT_SKIP_TAGS

    def __post_init__(self) -> None:
        for name in ("target", "rel"):
            value = getattr(self, name)
            if value is not None and not isinstance(value, str):
                raise InvalidInputError(
                    f"expected str or None, got {type(value).__name__}", field=name
                )

        if self.callback is not None and not callable(self.callback):
            raise InvalidInputError(
                f"expected a callable or None, got {type(self.callback).__name__}",
                field="callback",
            )

        object.__setattr__(self, "attributes", _normalize_attributes(self.attributes))
        object.__setattr__(self, "schemes", _normalize_schemes(self.schemes))
        object.__setattr__(self, "skip_tags", _normalize_skip_tags(self.skip_tags))

    @classmethod
    def from_dict(cls, config_dict: Mapping[str, Any]) -> "LinkOptions":
        """Create LinkOptions from a dictionary.

        Keys matching LinkOptions fields set those fields. Any other key with
        a string value becomes an extra anchor attribute, in dictionary
        order; unknown keys with non-string values are silently ignored.

        Args:
            config_dict: Dictionary with option values.

        Returns:
            New LinkOptions instance with values from dict.

        Example:
            >>> options = LinkOptions.from_dict({
            ...     "target": "_blank",
            ...     "class": "external",
            ... })
            >>> options.attributes
            (('class', 'external'),)

        """
        if not isinstance(config_dict, Mapping):
            raise InvalidInputError(
                f"expected a mapping, got {type(config_dict).__name__}", field="options"
            )

        valid_fields = {f.name for f in dataclasses.fields(cls)}
        known = {k: v for k, v in config_dict.items() if k in valid_fields}
        extra = tuple(
            (k, v)
            for k, v in config_dict.items()
            if k not in valid_fields and isinstance(v, str)
        )
        if extra:
            known["attributes"] = _normalize_attributes(known.get("attributes", ())) + extra
        return cls(**known)

    def replace(self, **changes: Any) -> "LinkOptions":
        """Return a copy with the given fields replaced.

        Fields passed as None are left untouched, so keyword overrides from
        a call site can be forwarded without filtering.
        """
        unknown = set(changes) - {f.name for f in dataclasses.fields(self)}
        if unknown:
            raise InvalidInputError(
                f"unknown option(s): {', '.join(sorted(unknown))}", field="options"
            )
        changes = {k: v for k, v in changes.items() if v is not None}
        if not changes:
            return self
        return dataclasses.replace(self, **changes)


def _normalize_attributes(
    attributes: Mapping[str, str] | Iterable[tuple[str, str]],
) -> tuple[tuple[str, str], ...]:
    items = attributes.items() if isinstance(attributes, Mapping) else attributes
    try:
        pairs = tuple((name, value) for name, value in items)
    except (TypeError, ValueError) as e:
        raise InvalidInputError(
            "expected a mapping or (name, value) pairs", field="attributes"
        ) from e

    for name, value in pairs:
        if not isinstance(name, str) or not _ATTRIBUTE_NAME_RE.match(name):
            raise InvalidInputError(f"invalid attribute name {name!r}", field="attributes")
        if name.lower() in _RESERVED_ATTRIBUTES:
            raise InvalidInputError(
                f"{name!r} is set by the renderer or its own option", field="attributes"
            )
        if not isinstance(value, str):
            raise InvalidInputError(
                f"value of {name!r} must be str, got {type(value).__name__}",
                field="attributes",
            )
    return pairs


def _normalize_schemes(schemes: Iterable[str]) -> tuple[str, ...]:
    if isinstance(schemes, str):
        schemes = (schemes,)
    normalized: list[str] = []
    for scheme in schemes:
        if not isinstance(scheme, str) or not _SCHEME_RE.match(scheme.lower()):
            raise InvalidInputError(f"invalid scheme {scheme!r}", field="schemes")
        if scheme.lower() not in normalized:
            normalized.append(scheme.lower())
    if not normalized:
        raise InvalidInputError("at least one scheme is required", field="schemes")
    return tuple(normalized)


def _normalize_skip_tags(tags: Iterable[str]) -> frozenset[str]:
    if isinstance(tags, str):
        tags = (tags,)
    normalized = set()
    for tag in tags:
        if not isinstance(tag, str) or not _TAG_NAME_RE.match(tag.lower()):
            raise InvalidInputError(f"invalid tag name {tag!r}", field="skip_tags")
        normalized.add(tag.lower())
    return frozenset(normalized)


# Module-level default options (reused, never recreated)
_DEFAULT_OPTIONS: LinkOptions = LinkOptions()

# Thread-local default via ContextVar
_link_options: ContextVar[LinkOptions] = ContextVar(
    "link_options",
    default=_DEFAULT_OPTIONS,
)


def get_link_options() -> LinkOptions:
    """Get the default link options for the current context.

    Returns:
        The active LinkOptions for this thread/context.

    """
    return _link_options.get()


def set_link_options(options: LinkOptions) -> None:
    """Set the default link options for the current context.

    Args:
        options: LinkOptions instance to use for this context.

    Thread Safety:
        Only affects the current thread's context. Other threads are unaffected.

    """
    if not isinstance(options, LinkOptions):
        raise InvalidInputError(
            f"expected LinkOptions, got {type(options).__name__}", field="options"
        )
    _link_options.set(options)


def resolve_options(
    options: "LinkOptions | Mapping[str, Any] | None" = None,
    **overrides: Any,
) -> LinkOptions:
    """Turn whatever a caller passed into a LinkOptions.

    None selects the context default (see get_link_options), a mapping goes
    through LinkOptions.from_dict. Keyword overrides that are not None
    replace the corresponding fields.

    Raises:
        InvalidInputError: If options has an unsupported type
    """
    if options is None:
        resolved = get_link_options()
    elif isinstance(options, LinkOptions):
        resolved = options
    elif isinstance(options, Mapping):
        resolved = LinkOptions.from_dict(options)
    else:
        raise InvalidInputError(
            f"expected LinkOptions, a mapping or None, got {type(options).__name__}",
            field="options",
        )
    return resolved.replace(**overrides)


def reset_link_options() -> None:
    """Reset to the module default options.

    Reuses the module-level _DEFAULT_OPTIONS singleton, avoiding allocation.
    """
    _link_options.set(_DEFAULT_OPTIONS)


@contextmanager
def link_options_context(options: LinkOptions) -> Iterator[None]:
    """Context manager for temporary default options.

    Args:
        options: LinkOptions to use within the context.

    Yields:
        None

    Example:
        >>> with link_options_context(LinkOptions(target="_blank")):
        ...     auto_link("See http://example.com")
        "See <a href='http://example.com' target='_blank'>http://example.com</a>"

    Thread Safety:
        Only affects the current thread's context. Properly restores previous
        options even if an exception is raised.

    """
    if not isinstance(options, LinkOptions):
        raise InvalidInputError(
            f"expected LinkOptions, got {type(options).__name__}", field="options"
        )
    token = _link_options.set(options)
    try:
        yield
    finally:
        _link_options.reset(token)


__all__ = [
    "DEFAULT_SCHEMES",
    "DEFAULT_SKIP_TAGS",
    "LinkCallback",
    "LinkOptions",
    "get_link_options",
    "link_options_context",
    "reset_link_options",
    "resolve_options",
    "set_link_options",
]
