"""
Tools exposed to the external dialogue agent

Each tool has an id, a description the language model reads when choosing a
tool, and a pydantic input model whose JSON schema is published.
"""

import logging
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Dict, List, Optional, Type

from pydantic import BaseModel

from app.core.exceptions import ToolNotFoundException
from app.models.requests import (
    AutoLocationRequest,
    DirectionsRequest,
    LocationLookupRequest,
)
from app.models.responses import (
    AutoLocationResponse,
    DirectionsResponse,
    LocationResponse,
)
from app.services.location_service import LocationService

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AgentTool:
    id: str
    description: str
    input_model: Type[BaseModel]
    handler: Callable[[LocationService, Any], Awaitable[BaseModel]]

    def describe(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "description": self.description,
            "input_schema": self.input_model.model_json_schema(),
        }


async def _auto_location(service: LocationService, args: AutoLocationRequest):
    return AutoLocationResponse.from_domain(await service.resolve_by_ip())


async def _current_location(service: LocationService, args: LocationLookupRequest):
    return LocationResponse.from_domain(await service.resolve_by_address(args.address))


async def _directions(service: LocationService, args: DirectionsRequest):
    estimate = await service.get_directions(args.origin, args.destination)
    return DirectionsResponse.from_domain(estimate)


AGENT_TOOLS: Dict[str, AgentTool] = {
    tool.id: tool
    for tool in (
        AgentTool(
            id="get-auto-location",
            description="Automatically detect user location based on IP address",
            input_model=AutoLocationRequest,
            handler=_auto_location,
        ),
        AgentTool(
            id="get-current-location",
            description="Get the current location coordinates (latitude and longitude)",
            input_model=LocationLookupRequest,
            handler=_current_location,
        ),
        AgentTool(
            id="get-directions",
            description="Get directions, distance, and travel time from origin to destination",
            input_model=DirectionsRequest,
            handler=_directions,
        ),
    )
}


def list_tools() -> List[Dict[str, Any]]:
    return [tool.describe() for tool in AGENT_TOOLS.values()]


async def run_tool(
    service: LocationService,
    tool_id: str,
    arguments: Optional[Dict[str, Any]] = None,
) -> BaseModel:
    """
    Validate arguments and run a tool

    Raises:
        ToolNotFoundException: unknown tool id
        pydantic.ValidationError: arguments do not match the input model
    """
    tool = AGENT_TOOLS.get(tool_id)
    if tool is None:
        raise ToolNotFoundException(tool_id)

    args = tool.input_model.model_validate(arguments or {})
    logger.info(f"Running tool {tool_id}")
    return await tool.handler(service, args)
