"""
Tool registry and dispatcher

Every tool is a ToolDefinition (name, title, description, pydantic input
model) paired with a handler ``(params) -> str``. The registry validates
arguments against the input model before calling the handler and wraps the
returned string in an InvocationResult.

Usage:
    registry = ToolRegistry()

    @registry.tool("perform-swot-analysis", title="SWOT Analysis Generator",
                   description="...", input_model=SwotAnalysisInput)
    def swot(params: SwotAnalysisInput) -> str:
        ...

    registry.invoke("perform-swot-analysis", {"businessName": "Acme", "industry": "retail"})
"""

import logging
import typing
from dataclasses import dataclass
from typing import Any, Callable, Dict, Iterator, List, Literal, Mapping, Optional, Tuple, Type, Union

from pydantic import ValidationError

from .errors import (
    DuplicateToolError,
    InvalidChoiceError,
    MissingRequiredFieldError,
    NumericInputError,
    ToolError,
    ToolInputError,
    UnknownToolError,
)
from .schemas import InvocationResult, ToolInput

logger = logging.getLogger(__name__)

Handler = Callable[[ToolInput], str]

# pydantic error types that mean "this was not a usable number"
_NUMERIC_ERRORS = {"float_parsing", "float_type", "finite_number", "int_parsing", "int_type", "int_from_float"}


def _unwrap_optional(annotation):
    if typing.get_origin(annotation) is Union:
        args = [a for a in typing.get_args(annotation) if a is not type(None)]
        if len(args) == 1:
            return args[0]
    return annotation


def field_kind(annotation) -> Tuple[str, Optional[Tuple[str, ...]]]:
    """Map a field annotation to ("string" | "number" | "enum", enum values)"""
    annotation = _unwrap_optional(annotation)
    if typing.get_origin(annotation) is Literal:
        return "enum", tuple(typing.get_args(annotation))
    if annotation in (int, float):
        return "number", None
    return "string", None


def _is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


@dataclass(frozen=True)
class ToolDefinition:
    """Immutable description of a tool: identity, docs, and input contract"""

    name: str
    title: str
    description: str
    input_model: Type[ToolInput]
    suite: Optional[str] = None
    read_only: bool = True

    def fields(self) -> Iterator[Tuple[str, str, Any]]:
        """Yield (wire name, attribute name, FieldInfo) in declaration order"""
        for attr, info in self.input_model.model_fields.items():
            yield info.alias or attr, attr, info

    def required_fields(self) -> List[str]:
        return [wire for wire, _, info in self.fields() if info.is_required()]

    def input_schema(self) -> Dict[str, Dict[str, Any]]:
        """Ordered field map: wire name -> {kind, required, description, enumValues?}"""
        schema = {}
        for wire, _, info in self.fields():
            kind, choices = field_kind(info.annotation)
            entry = {
                "kind": kind,
                "required": info.is_required(),
                "description": info.description or "",
            }
            if choices:
                entry["enumValues"] = choices
            schema[wire] = entry
        return schema

    def parse(self, arguments: Mapping[str, Any]) -> ToolInput:
        """Validate raw arguments into the tool's input model

        Raises:
            MissingRequiredFieldError: required field absent, null or blank
            NumericInputError: numeric field not coercible to a finite number
            InvalidChoiceError: enum field outside its allowed values
            ToolInputError: any other schema violation
        """
        cleaned = dict(arguments)

        for wire, attr, info in self.fields():
            key = wire if wire in cleaned else attr
            value = cleaned.get(key)
            # pydantic's lax float mode would read True as 1.0
            if isinstance(value, bool) and field_kind(info.annotation)[0] == "number":
                raise NumericInputError(wire, value, tool_name=self.name)
            if info.is_required():
                if _is_blank(value):
                    raise MissingRequiredFieldError(wire, tool_name=self.name)
            elif key in cleaned and _is_blank(value):
                # Blank optionals behave as absent and get their fallback text
                del cleaned[key]

        try:
            return self.input_model.model_validate(cleaned)
        except ValidationError as e:
            raise self._translate(e) from e

    def _translate(self, error: ValidationError) -> ToolInputError:
        first = error.errors()[0]
        field = str(first["loc"][0]) if first["loc"] else ""
        value = first.get("input")

        if first["type"] in _NUMERIC_ERRORS:
            return NumericInputError(field, value, tool_name=self.name)
        if first["type"] == "literal_error":
            info = next(i for w, a, i in self.fields() if field in (w, a))
            _, choices = field_kind(info.annotation)
            return InvalidChoiceError(field, value, choices or (), tool_name=self.name)
        if first["type"] == "missing":
            return MissingRequiredFieldError(field, tool_name=self.name)
        return ToolInputError(f"Invalid value for '{field}': {first['msg']}", field, self.name)


class ToolRegistry:
    """Name -> (definition, handler) mapping, populated once at startup"""

    def __init__(self):
        self._tools: Dict[str, Tuple[ToolDefinition, Handler]] = {}

    def register(self, definition: ToolDefinition, handler: Handler) -> None:
        """Add a tool

        Raises:
            DuplicateToolError: If a tool with the same name exists
        """
        if definition.name in self._tools:
            raise DuplicateToolError(definition.name)
        self._tools[definition.name] = (definition, handler)
        logger.debug(f"Registered tool {definition.name} ({definition.suite or 'no suite'})")

    def tool(
        self,
        name: str,
        *,
        title: str,
        description: str,
        input_model: Type[ToolInput],
        suite: Optional[str] = None,
        read_only: bool = True,
    ) -> Callable[[Handler], Handler]:
        """Decorator form of register(); returns the handler unchanged"""
        def decorator(handler: Handler) -> Handler:
            self.register(
                ToolDefinition(
                    name=name,
                    title=title,
                    description=description,
                    input_model=input_model,
                    suite=suite,
                    read_only=read_only,
                ),
                handler,
            )
            return handler
        return decorator

    def get(self, tool_name: str) -> ToolDefinition:
        """Look up a definition by name

        Raises:
            UnknownToolError: If no tool has this name
        """
        return self._lookup(tool_name)[0]

    def _lookup(self, tool_name: str) -> Tuple[ToolDefinition, Handler]:
        try:
            return self._tools[tool_name]
        except KeyError:
            raise UnknownToolError(tool_name) from None

    def definitions(self, suite: Optional[str] = None) -> List[ToolDefinition]:
        return [d for d, _ in self._tools.values() if suite is None or d.suite == suite]

    def names(self, suite: Optional[str] = None) -> List[str]:
        return [d.name for d in self.definitions(suite)]

    def __contains__(self, tool_name: str) -> bool:
        return tool_name in self._tools

    def __len__(self) -> int:
        return len(self._tools)

    def invoke(self, tool_name: str, arguments: Optional[Mapping[str, Any]] = None) -> InvocationResult:
        """Validate arguments, run the handler, wrap its text

        Raises:
            UnknownToolError: tool_name is not registered
            ToolInputError: arguments fail the tool's input schema
        """
        definition, handler = self._lookup(tool_name)

        try:
            params = definition.parse(arguments or {})
        except ToolInputError as e:
            logger.warning(f"Rejected {tool_name}: {e}")
            raise

        logger.info(f"Invoking {tool_name}")
        return InvocationResult.success(handler(params))

    def dispatch(self, tool_name: str, arguments: Optional[Mapping[str, Any]] = None) -> InvocationResult:
        """Like invoke(), but registry errors come back as an isError envelope"""
        try:
            return self.invoke(tool_name, arguments)
        except ToolError as e:
            return InvocationResult.failure(e.user_message())
