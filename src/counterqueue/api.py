"""counterqueue FastAPI application."""

from __future__ import annotations

import logging

import uvicorn
from fastapi import FastAPI

from counterqueue.models import CallRecord, ServiceCategory, Ticket
from counterqueue.schemas import (
    BoardView,
    CallRecordView,
    OperatorActionResponse,
    ServiceCategoryView,
    TicketIssueRequest,
    TicketView,
)
from counterqueue.services import QueueManager
from counterqueue.settings import settings

logger = logging.getLogger(__name__)

EMPTY_QUEUE_MESSAGE = "No more waiting customers."
NO_CURRENT_MESSAGE = "No ticket is being served."

app = FastAPI(title="counterqueue", version="0.1.0")

# Handlers that touch queue_manager must be async: the manager is only
# mutated from the event loop thread.
queue_manager = QueueManager()


def _ticket_view(ticket: Ticket | None) -> TicketView | None:
    if ticket is None:
        return None
    return TicketView(id=ticket.id, label=ticket.label, service=ticket.service)


def _call_view(record: CallRecord) -> CallRecordView:
    return CallRecordView(label=record.label, service=record.service, called_at=record.called_at)


def _board() -> BoardView:
    return BoardView(
        waiting_count=queue_manager.waiting_count,
        current_ticket=_ticket_view(queue_manager.current_ticket),
        recent_calls=[_call_view(record) for record in queue_manager.recent_calls],
        waiting=[ticket.label for ticket in queue_manager.waiting_tickets],
    )


def _operator_response(ticket: Ticket | None, empty_message: str) -> OperatorActionResponse:
    return OperatorActionResponse(
        processed=ticket is not None,
        ticket=_ticket_view(ticket),
        message=None if ticket is not None else empty_message,
        board=_board(),
    )


@app.get("/health")
def health() -> dict:
    return {"status": "ok", "service": "counterqueue"}


@app.get("/services", response_model=list[ServiceCategoryView])
async def list_services() -> list[ServiceCategoryView]:
    return [ServiceCategoryView(category=category.value, prefix=category.prefix) for category in ServiceCategory]


@app.post("/tickets", response_model=TicketView, status_code=201)
async def issue_ticket(payload: TicketIssueRequest) -> TicketView:
    ticket = queue_manager.issue_ticket(payload.service)
    return _ticket_view(ticket)


@app.post("/calls/next", response_model=OperatorActionResponse)
async def call_next() -> OperatorActionResponse:
    return _operator_response(queue_manager.call_next(), EMPTY_QUEUE_MESSAGE)


@app.post("/calls/recall", response_model=OperatorActionResponse)
async def recall_current() -> OperatorActionResponse:
    return _operator_response(queue_manager.recall_current(), NO_CURRENT_MESSAGE)


@app.post("/calls/finish", response_model=OperatorActionResponse)
async def finish_current() -> OperatorActionResponse:
    return _operator_response(queue_manager.finish_current(), NO_CURRENT_MESSAGE)


@app.get("/board", response_model=BoardView)
async def board() -> BoardView:
    return _board()


def main() -> None:
    logging.basicConfig(level=settings.log_level)
    logger.info("starting counterqueue api on %s:%s", settings.api_host, settings.api_port)
    uvicorn.run(
        "counterqueue.api:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=False,
    )


if __name__ == "__main__":
    main()
