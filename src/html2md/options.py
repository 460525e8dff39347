#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Configuration options for HTML to Markdown rendering.

Options are immutable. A render call builds one ``RenderOptions`` from the
defaults and the caller's overrides, and rules that need a different setting
for a subtree derive a copy with :meth:`CloneFrozenMixin.create_updated`
instead of mutating the shared instance.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, field, fields, replace
from typing import Any

if sys.version_info >= (3, 11):
    from typing import Self
else:
    from typing_extensions import Self

from html2md.constants import DEFAULT_HEADER_OFFSET, DEFAULT_NORMALIZE_WHITESPACE
from html2md.exceptions import ValidationError


@dataclass(frozen=True)
class CloneFrozenMixin:
    """Mixin providing frozen dataclass cloning capabilities."""

    def create_updated(self, **kwargs: Any) -> Self:
        """Create a new instance with updated field values.

        Parameters
        ----------
        **kwargs : Any
            Field names and their new values

        Returns
        -------
        Self
            New instance with specified fields updated

        """
        return replace(self, **kwargs)


@dataclass(frozen=True)
class RenderOptions(CloneFrozenMixin):
    """Options controlling how an HTML tree is rendered to Markdown.

    Parameters
    ----------
    normalize_whitespace : bool, default True
        Collapse runs of whitespace in text nodes to a single space. When
        False, text is only escaped and line breaks are kept verbatim. The
        renderer switches this off for the contents of ``<pre>`` blocks.
    header_offset : int, default 0
        Added to the heading level before emitting ``#`` markers, so that a
        rendered document can be embedded below an existing heading. There
        is no upper clamp: ``<h6>`` with an offset of 2 emits eight markers.

    """

    normalize_whitespace: bool = field(
        default=DEFAULT_NORMALIZE_WHITESPACE,
        metadata={"help": "Collapse whitespace runs in text to a single space", "importance": "core"},
    )
    header_offset: int = field(
        default=DEFAULT_HEADER_OFFSET,
        metadata={"help": "Number of levels added to every heading", "type": int, "importance": "core"},
    )

    def __post_init__(self) -> None:
        """Validate field types and ranges.

        Raises
        ------
        ValueError
            If any field value is outside its valid range.

        """
        if not isinstance(self.normalize_whitespace, bool):
            raise ValueError(f"normalize_whitespace must be a bool, got {type(self.normalize_whitespace).__name__}")
        # bool is an int subclass, so reject it explicitly
        if isinstance(self.header_offset, bool) or not isinstance(self.header_offset, int):
            raise ValueError(f"header_offset must be an int, got {type(self.header_offset).__name__}")
        if self.header_offset < 0:
            raise ValueError(f"header_offset must be non-negative, got {self.header_offset}")


DEFAULT_OPTIONS = RenderOptions()


def merge_options(options: RenderOptions | None = None, **overrides: Any) -> RenderOptions:
    """Merge keyword overrides over a base set of options.

    Parameters
    ----------
    options : RenderOptions, optional
        Base options. ``DEFAULT_OPTIONS`` is used when omitted.
    **overrides : Any
        Field values to replace, e.g. ``header_offset=1``.

    Returns
    -------
    RenderOptions
        The merged options.

    Raises
    ------
    ValidationError
        If ``options`` is not a ``RenderOptions``, an override names an unknown
        field, or a merged value fails validation.

    """
    if options is None:
        options = DEFAULT_OPTIONS
    elif not isinstance(options, RenderOptions):
        raise ValidationError(
            f"options must be a RenderOptions instance, got {type(options).__name__}",
            parameter_name="options",
            parameter_value=options,
        )

    if not overrides:
        return options

    known = {f.name for f in fields(RenderOptions)}
    unknown = sorted(name for name in overrides if name not in known)
    if unknown:
        raise ValidationError(
            f"Unknown render option(s): {', '.join(unknown)}. Valid options: {', '.join(sorted(known))}",
            parameter_name=unknown[0],
            parameter_value=overrides[unknown[0]],
        )

    try:
        return options.create_updated(**overrides)
    except ValueError as e:
        raise ValidationError(str(e), parameter_name="options", parameter_value=overrides, original_error=e) from e
