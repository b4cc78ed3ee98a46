"""
Agent tool endpoints

The dialogue agent lists the tools, picks one and posts its arguments.
"""

from typing import Any, Dict, Optional
import logging

from fastapi import APIRouter, Body, Depends, HTTPException
from pydantic import ValidationError

from app.api.deps import get_location_service, to_http_exception
from app.core.exceptions import LocationAgentException
from app.models.responses import ToolListResponse
from app.services.agent_tools import list_tools, run_tool
from app.services.location_service import LocationService

router = APIRouter()
logger = logging.getLogger(__name__)


@router.get("", response_model=ToolListResponse)
async def get_tools():
    tools = list_tools()
    return {"count": len(tools), "tools": tools}


@router.post("/{tool_id}")
async def invoke_tool(
    tool_id: str,
    arguments: Optional[Dict[str, Any]] = Body(default=None),
    service: LocationService = Depends(get_location_service),
):
    """
    Run a tool with JSON arguments

    Example:
        POST /v1/tools/get-directions
        {"origin": "Ikeja", "destination": "Victoria Island"}
    """
    try:
        result = await run_tool(service, tool_id, arguments)
        return result.model_dump()

    except ValidationError as e:
        raise HTTPException(status_code=422, detail=e.errors(include_url=False))
    except LocationAgentException as e:
        logger.warning(f"Tool {tool_id} failed: {e.message}")
        raise to_http_exception(e)
