"""Error types raised by the tool registry and handlers."""

ERROR_MARKER = "❌"


class ToolError(Exception):
    """Base error for tool registration and invocation."""

    hint = "Check the request and try again."

    def user_message(self) -> str:
        """Render as the short, marker-prefixed text shown to callers."""
        return f"{ERROR_MARKER} {self}\n\n{self.hint}"


class UnknownToolError(ToolError):
    """Invocation names a tool that is not registered."""

    hint = "List the available tools and use one of their names."

    def __init__(self, tool_name: str):
        super().__init__(f"Unknown tool: {tool_name}")
        self.tool_name = tool_name


class DuplicateToolError(ToolError):
    """A tool with the same name is already registered."""

    def __init__(self, tool_name: str):
        super().__init__(f"Tool already registered: {tool_name}")
        self.tool_name = tool_name


class ToolInputError(ToolError):
    """Arguments do not satisfy the tool's input schema."""

    def __init__(self, message: str, field: str = None, tool_name: str = None):
        super().__init__(message)
        self.field = field
        self.tool_name = tool_name


class MissingRequiredFieldError(ToolInputError):
    """A required field is absent, null, or blank."""

    hint = "Provide a non-empty value for every required field and try again."

    def __init__(self, field: str, tool_name: str = None):
        where = f" for {tool_name}" if tool_name else ""
        super().__init__(f"Missing required field '{field}'{where}", field, tool_name)


class NumericInputError(ToolInputError):
    """A numeric field received a value that is not a finite number."""

    hint = "Numeric fields accept plain numbers such as 25000 or 12.5."

    def __init__(self, field: str, value=None, tool_name: str = None):
        super().__init__(f"Field '{field}' must be a number, got {value!r}", field, tool_name)
        self.value = value


class InvalidChoiceError(ToolInputError):
    """An enum field received a value outside its allowed set."""

    def __init__(self, field: str, value, choices, tool_name: str = None):
        super().__init__(
            f"Field '{field}' must be one of {', '.join(choices)}, got {value!r}",
            field,
            tool_name,
        )
        self.value = value
        self.choices = tuple(choices)
        self.hint = f"Use one of: {', '.join(self.choices)}."


class FilesystemError(ToolError):
    """Creating the output directory or writing a plan failed."""

    hint = "Please ensure you have write permissions to the output directory and try again."

    def __init__(self, message: str, path=None):
        super().__init__(message)
        self.path = path
