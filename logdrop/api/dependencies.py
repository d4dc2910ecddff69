from fastapi import Request

from logdrop.infrastructure.service_factory import LogdropServices


def get_services(request: Request) -> LogdropServices:
    return request.app.state.services  # type: ignore[no-any-return]
