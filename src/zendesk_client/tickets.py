"""Tickets endpoint of the Zendesk API."""

import logging
from typing import TYPE_CHECKING, Any, Mapping, Sequence, Union

from .errors import ParseError
from .models import MergedTicket, MergeRequest

if TYPE_CHECKING:
    from .api_wrapper import APIWrapper

logger = logging.getLogger(__name__)


class TicketsAPI:
    """Operations on /api/v2/tickets.

    Accessed through ``APIWrapper.tickets``; it holds no state of its own.
    """

    def __init__(self, api: 'APIWrapper'):
        self._api = api

    def merge(
        self,
        target_id: int,
        request: Union[MergeRequest, Mapping[str, Any]],
    ) -> MergedTicket:
        """Merge one or more source tickets into a target ticket.

        Sends exactly one PUT to /api/v2/tickets/{target_id}/merge. Nothing
        is retried or cached.

        Args:
            target_id: Id of the ticket that survives the merge
            request: MergeRequest, or a dict with the same field names

        Returns:
            MergedTicket: The target ticket as returned by the server

        Raises:
            ValueError: If target_id or the source ids are invalid
            TicketNotFoundError: If the target or a source ticket doesn't exist
            RequestError: If the server rejects the merge
            NetworkError: If the API is unreachable
            ParseError: If the response has no 'ticket' object with an integer id
        """
        if not isinstance(request, MergeRequest):
            request = MergeRequest.from_dict(request)

        _validate_ticket_id(target_id, "target_id")
        _validate_source_ids(target_id, request.ids)

        path = f"tickets/{target_id}/merge"
        body = self._api.request("PUT", path, payload=request.to_payload())

        try:
            ticket = self._api.unwrap(body, "ticket")
            ticket_id = ticket.get("id")
            if isinstance(ticket_id, bool) or not isinstance(ticket_id, int):
                raise ParseError(f"merged ticket id is {ticket_id!r}, expected an integer")
        except ParseError as e:
            logger.error(f"API operation failed: PUT {path} - {e}")
            raise

        logger.info(f"Merged tickets {list(request.ids)} into ticket {target_id}")
        return MergedTicket.from_dict(ticket)


def _validate_ticket_id(ticket_id: Any, name: str) -> None:
    """Validate that a ticket id is a positive integer.

    Raises:
        ValueError: If ticket_id is not a positive integer
    """
    if isinstance(ticket_id, bool) or not isinstance(ticket_id, int):
        raise ValueError(
            f"Invalid {name}: {ticket_id!r}. Ticket ids must be integers."
        )
    if ticket_id <= 0:
        raise ValueError(
            f"Invalid {name}: {ticket_id}. Ticket ids must be positive."
        )


def _validate_source_ids(target_id: int, ids: Sequence[Any]) -> None:
    if isinstance(ids, (str, bytes)) or not ids:
        raise ValueError("ids must be a non-empty sequence of ticket ids")

    for ticket_id in ids:
        _validate_ticket_id(ticket_id, "source id")

    if target_id in ids:
        raise ValueError(f"ids must not contain the target ticket {target_id}")
    if len(set(ids)) != len(ids):
        raise ValueError("ids must not contain duplicates")
