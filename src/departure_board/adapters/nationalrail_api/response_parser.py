"""Parser for Darwin GetDepartureBoard SOAP responses.

Elements are matched by local name: the response uses several dated
namespaces that change between API versions.
"""

import logging
import xml.etree.ElementTree as ET

from departure_board.adapters.nationalrail_api.models import (
    RailLocation,
    RailService,
    StationBoardResult,
)
from departure_board.domain.errors import BackendReportedError, ProtocolError

logger = logging.getLogger(__name__)


def _local_name(tag: str) -> str:
    return tag.rsplit("}", 1)[-1]


def _find(element: ET.Element, name: str) -> ET.Element | None:
    """First direct child with the given local name."""
    for child in element:
        if _local_name(child.tag) == name:
            return child
    return None


def _find_all(element: ET.Element, name: str) -> list[ET.Element]:
    return [child for child in element if _local_name(child.tag) == name]


def _find_descendant(element: ET.Element, name: str) -> ET.Element | None:
    for node in element.iter():
        if _local_name(node.tag) == name:
            return node
    return None


def _text(element: ET.Element | None, name: str) -> str:
    if element is None:
        return ""
    child = _find(element, name)
    if child is None or child.text is None:
        return ""
    return child.text.strip()


def _parse_locations(element: ET.Element | None) -> list[RailLocation]:
    if element is None:
        return []
    return [
        RailLocation(location_name=_text(loc, "locationName"), crs=_text(loc, "crs"))
        for loc in _find_all(element, "location")
    ]


def _parse_service(element: ET.Element) -> RailService:
    return RailService(
        std=_text(element, "std"),
        etd=_text(element, "etd"),
        destinations=_parse_locations(_find(element, "destination")),
        platform=_text(element, "platform"),
        service_type=_text(element, "serviceType"),
    )


def _parse_services(board: ET.Element, name: str) -> list[RailService]:
    container = _find(board, name)
    if container is None:
        return []
    return [_parse_service(service) for service in _find_all(container, "service")]


def _fault_reason(fault: ET.Element) -> str:
    """Text of a SOAP 1.2 Reason/Text or SOAP 1.1 faultstring element."""
    for name in ("Text", "faultstring"):
        node = _find_descendant(fault, name)
        if node is not None and node.text:
            return node.text.strip()
    return "unknown SOAP fault"


def parse_departure_board(body: str) -> StationBoardResult:
    """Parse a GetDepartureBoard response envelope.

    Raises:
        ProtocolError: If the body is not XML or has no station board.
        BackendReportedError: If the envelope carries a SOAP fault.
    """
    try:
        root = ET.fromstring(body)
    except ET.ParseError as e:
        raise ProtocolError(f"unexpected National Rail response: {e}") from e

    fault = _find_descendant(root, "Fault")
    if fault is not None:
        reason = _fault_reason(fault)
        raise BackendReportedError(f"SOAP fault: {reason}", [reason])

    board = _find_descendant(root, "GetStationBoardResult")
    if board is None:
        raise ProtocolError("National Rail response has no GetStationBoardResult")

    messages_node = _find(board, "nrccMessages")
    messages = (
        [m.text.strip() for m in _find_all(messages_node, "message") if m.text]
        if messages_node is not None
        else []
    )

    result = StationBoardResult(
        location_name=_text(board, "locationName"),
        crs=_text(board, "crs"),
        messages=messages,
        train_services=_parse_services(board, "trainServices"),
        bus_services=_parse_services(board, "busServices"),
    )
    for message in result.messages:
        logger.info(f"{result.crs or result.location_name}: {message}")
    return result
