"""Translate CAS decisions into Starlette responses."""

from starlette.responses import PlainTextResponse, RedirectResponse, Response

from ...core.value_objects import AuthAction, AuthDecision, SloAcknowledgement


def decision_response(decision: AuthDecision) -> Response:
    """Response for a non-proceed decision.

    Raises:
        ValueError: If the decision says the request should proceed
    """
    if decision.action is AuthAction.REDIRECT:
        return RedirectResponse(decision.location, status_code=decision.status_code)
    if decision.action is AuthAction.UNAUTHORIZED:
        return Response(status_code=decision.status_code)
    raise ValueError("A proceed decision has no response")


def acknowledgement_response(ack: SloAcknowledgement) -> Response:
    return PlainTextResponse(ack.body, status_code=ack.status_code)
