"""Data models for the Zendesk tickets API.

This module defines the request and result types exchanged with the
ticket merge endpoint, plus the transport-level response type.
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Dict, List, Mapping, NamedTuple, Optional, Sequence


class HTTPResponse(NamedTuple):
    """Raw HTTP response handed back by a transport."""
    status_code: int
    text: str
    headers: Mapping[str, str] = MappingProxyType({})


@dataclass
class MergeRequest:
    """Payload for merging source tickets into a target ticket.

    The visibility flags only apply when the matching comment is given.
    A flag without its comment is left out of the request body.

    Attributes:
        ids: Source ticket ids to merge into the target
        target_comment: Comment added to the target ticket
        source_comment: Comment added to each source ticket
        target_comment_is_public: Whether the target comment is public
        source_comment_is_public: Whether the source comment is public
    """

    ids: List[int]
    target_comment: Optional[str] = None
    source_comment: Optional[str] = None
    target_comment_is_public: bool = True
    source_comment_is_public: bool = True

    def __post_init__(self):
        # None means "not given", which is the public default
        for name in ('target_comment_is_public', 'source_comment_is_public'):
            value = getattr(self, name)
            if value is None:
                setattr(self, name, True)
            elif not isinstance(value, bool):
                raise ValueError(
                    f"{name} must be a boolean, got {value!r}"
                )

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> 'MergeRequest':
        """Build a MergeRequest from the documented JSON field names.

        Raises:
            ValueError: If 'ids' is missing, unknown keys are present,
                or a visibility flag is not a boolean
        """
        known = {
            'ids',
            'target_comment',
            'source_comment',
            'target_comment_is_public',
            'source_comment_is_public',
        }
        unknown = set(data) - known
        if unknown:
            raise ValueError(
                f"Unknown merge fields: {', '.join(sorted(unknown))}"
            )
        if 'ids' not in data:
            raise ValueError("Merge request requires 'ids'")
        ids = data['ids']
        if isinstance(ids, (str, bytes)) or not isinstance(ids, Sequence):
            raise ValueError("'ids' must be a sequence of ticket ids")

        return cls(
            ids=list(ids),
            target_comment=data.get('target_comment'),
            source_comment=data.get('source_comment'),
            target_comment_is_public=data.get('target_comment_is_public'),
            source_comment_is_public=data.get('source_comment_is_public'),
        )

    def to_payload(self) -> Dict[str, Any]:
        """Serialize to the JSON body expected by the merge endpoint."""
        payload: Dict[str, Any] = {'ids': list(self.ids)}

        if self.target_comment is not None:
            payload['target_comment'] = self.target_comment
            payload['target_comment_is_public'] = self.target_comment_is_public

        if self.source_comment is not None:
            payload['source_comment'] = self.source_comment
            payload['source_comment_is_public'] = self.source_comment_is_public

        return payload


@dataclass
class MergedTicket:
    """The target ticket as returned by the server after a merge.

    Only ``id`` is interpreted; everything else the server sends is kept
    as-is in ``fields``.
    """

    id: int
    fields: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> 'MergedTicket':
        return cls(id=data['id'], fields=dict(data))

    def __getitem__(self, key: str) -> Any:
        return self.fields[key]

    def get(self, key: str, default: Any = None) -> Any:
        return self.fields.get(key, default)

    def to_dict(self) -> Dict[str, Any]:
        return dict(self.fields)
