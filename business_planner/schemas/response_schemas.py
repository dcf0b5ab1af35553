"""Request/response envelopes shared by every tool

The same shape is returned whatever the handler: a list of text content
blocks. ``isError`` is only set by ``ToolRegistry.dispatch`` when the
registry itself rejected the call.
"""

from typing import Any, Dict, List, Literal

from pydantic import BaseModel, ConfigDict, Field


class TextContent(BaseModel):
    """Single text block of a tool result"""
    type: Literal["text"] = Field("text", description="Content kind")
    text: str = Field(..., description="Rendered handler output")


class InvocationRequest(BaseModel):
    """A tool call: tool name plus a flat argument map"""
    model_config = ConfigDict(populate_by_name=True)

    tool_name: str = Field(..., alias="toolName", description="Registered tool name")
    arguments: Dict[str, Any] = Field(default_factory=dict, description="Flat field -> value map")


class InvocationResult(BaseModel):
    """Uniform response envelope"""
    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "content": [{"type": "text", "text": "# SWOT Analysis for Acme\n..."}],
                "isError": False
            }
        }
    )

    content: List[TextContent] = Field(..., description="Ordered text blocks")
    is_error: bool = Field(False, alias="isError", description="True when the call was rejected")

    @classmethod
    def success(cls, text: str) -> "InvocationResult":
        return cls(content=[TextContent(text=text)])

    @classmethod
    def failure(cls, message: str) -> "InvocationResult":
        return cls(content=[TextContent(text=message)], is_error=True)

    @property
    def text(self) -> str:
        """All text blocks joined, for callers that want a single string"""
        return "\n".join(block.text for block in self.content)
