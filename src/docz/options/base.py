"""Base classes for parser and renderer options.

Options are frozen dataclasses: a configured parser or renderer never sees its
options change underneath it. Use ``create_updated`` to derive a variant.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, field, replace
from typing import Any

if sys.version_info >= (3, 11):
    from typing import Self
else:
    from typing_extensions import Self

from docz.constants import DEFAULT_CREATOR


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
class BaseRendererOptions(CloneFrozenMixin):
    """Base class for all renderer options.

    Parameters
    ----------
    creator : str or None, default "docz"
        Generator name written into output metadata; None disables it.

    """

    creator: str | None = field(
        default=DEFAULT_CREATOR,
        metadata={"help": "Generator name written into output metadata (None to disable)", "importance": "core"},
    )


@dataclass(frozen=True)
class BaseParserOptions(CloneFrozenMixin):
    """Base class for all parser options.

    Parameters
    ----------
    encoding : str, default "utf-8"
        Encoding used to decode the input bytes.

    """

    encoding: str = field(
        default="utf-8",
        metadata={"help": "Encoding used to decode source bytes", "importance": "advanced"},
    )
