# Built-in tool definitions
# Predefined tools for common workflow operations

import logging

from ..models.tool import Tool, validate_tool
from .registry import ToolRegistry

logger = logging.getLogger(__name__)


HTTP_REQUEST_TOOL = validate_tool({
    "name": "httpRequest",
    "description": "Make an HTTP request to an external API",
    "parameters": {
        "url": {
            "name": "url",
            "description": "The URL to send the request to",
            "type": "string",
            "format": "uri",
            "required": True,
        },
        "method": {
            "name": "method",
            "description": "The HTTP method to use",
            "type": "string",
            "required": True,
            "enum": ["GET", "POST", "PUT", "DELETE", "PATCH", "HEAD", "OPTIONS"],
        },
        "headers": {
            "name": "headers",
            "description": "HTTP headers to include in the request",
            "type": "object",
            "properties": {},
            "additionalProperties": True,
        },
        "queryParameters": {
            "name": "queryParameters",
            "description": "Query parameters to include in the URL",
            "type": "object",
            "properties": {},
            "additionalProperties": True,
        },
        "body": {
            "name": "body",
            "description": "The body of the request (for POST, PUT, PATCH)",
            "type": "string",
        },
    },
    "requiredParameters": ["url", "method"],
    "returns": {
        "name": "response",
        "description": "The HTTP response",
        "type": "object",
        "properties": {
            "statusCode": {
                "name": "statusCode",
                "description": "The HTTP status code",
                "type": "number",
                "format": "int32",
                "required": True,
            },
            "headers": {
                "name": "headers",
                "description": "The response headers",
                "type": "object",
                "properties": {},
                "additionalProperties": True,
            },
            "body": {
                "name": "body",
                "description": "The response body",
                "type": "string",
                "required": True,
            },
        },
        "required": ["statusCode", "headers", "body"],
    },
    "tags": ["http", "api", "external"],
    "examples": [
        {
            "input": {
                "url": "https://api.example.com/data",
                "method": "GET",
                "headers": {
                    "Content-Type": "application/json",
                    "Authorization": "Bearer abc123",
                },
            },
            "output": {
                "statusCode": 200,
                "headers": {"content-type": "application/json"},
                "body": '{"data": {"id": 1, "name": "Example"}}',
            },
            "description": "Get data from an example API",
        },
    ],
})

DATABASE_QUERY_TOOL = validate_tool({
    "name": "databaseQuery",
    "description": "Query a database to retrieve or manipulate data",
    "parameters": {
        "connectionName": {
            "name": "connectionName",
            "description": "The name of the database connection to use",
            "type": "string",
            "required": True,
        },
        "query": {
            "name": "query",
            "description": "The SQL query to execute",
            "type": "string",
            "required": True,
        },
        "parameters": {
            "name": "parameters",
            "description": "Parameters for the query (to prevent SQL injection)",
            "type": "array",
            "items": {
                "name": "parameter",
                "description": "A parameter value",
                "type": "string",
                "required": True,
            },
        },
    },
    "requiredParameters": ["connectionName", "query"],
    "returns": {
        "name": "result",
        "description": "The query result",
        "type": "object",
        "properties": {
            "rows": {
                "name": "rows",
                "description": "The rows returned by the query",
                "type": "array",
                "required": True,
                "items": {
                    "name": "row",
                    "description": "A result row",
                    "type": "object",
                    "properties": {},
                    "additionalProperties": True,
                },
            },
            "rowCount": {
                "name": "rowCount",
                "description": "The number of rows affected or returned",
                "type": "number",
                "minimum": 0,
                "required": True,
            },
        },
        "required": ["rows", "rowCount"],
    },
    "tags": ["database", "sql", "data"],
    "examples": [
        {
            "input": {
                "connectionName": "postgres",
                "query": "SELECT * FROM users WHERE id = $1",
                "parameters": ["123"],
            },
            "output": {
                "rows": [{"id": 123, "name": "John Doe", "email": "john@example.com"}],
                "rowCount": 1,
            },
            "description": "Query a user from a PostgreSQL database",
        },
    ],
})

FILE_OPERATION_TOOL = validate_tool({
    "name": "fileOperation",
    "description": "Perform operations on files and directories",
    "parameters": {
        "operation": {
            "name": "operation",
            "description": "The operation to perform",
            "type": "string",
            "required": True,
            "enum": ["read", "write", "list", "delete", "exists"],
        },
        "path": {
            "name": "path",
            "description": "The path to the file or directory",
            "type": "string",
            "required": True,
        },
        "content": {
            "name": "content",
            "description": "The content to write (for write operation)",
            "type": "string",
        },
        "encoding": {
            "name": "encoding",
            "description": "The encoding to use for reading or writing",
            "type": "string",
            "default": "utf8",
        },
    },
    "requiredParameters": ["operation", "path"],
    "returns": {
        "name": "result",
        "description": "The result of the file operation",
        "type": "object",
        "properties": {
            "success": {
                "name": "success",
                "description": "Whether the operation was successful",
                "type": "boolean",
                "required": True,
            },
            "data": {
                "name": "data",
                "description": "The operation result data",
                "type": "string",
            },
            "files": {
                "name": "files",
                "description": "List of files (for list operation)",
                "type": "array",
                "items": {
                    "name": "file",
                    "description": "A file or directory",
                    "type": "object",
                    "properties": {
                        "name": {
                            "name": "name",
                            "description": "The file or directory name",
                            "type": "string",
                            "required": True,
                        },
                        "path": {
                            "name": "path",
                            "description": "The full path",
                            "type": "string",
                            "required": True,
                        },
                        "type": {
                            "name": "type",
                            "description": "The item type (file or directory)",
                            "type": "string",
                            "required": True,
                            "enum": ["file", "directory"],
                        },
                        "size": {
                            "name": "size",
                            "description": "The file size in bytes",
                            "type": "number",
                            "minimum": 0,
                        },
                    },
                    "required": ["name", "path", "type"],
                },
            },
            "error": {
                "name": "error",
                "description": "Error message if the operation failed",
                "type": "string",
            },
        },
        "required": ["success"],
    },
    "tags": ["file", "filesystem", "io"],
})

WEATHER_TOOL = validate_tool({
    "name": "weatherInfo",
    "description": "Get weather information for a location",
    "parameters": {
        "location": {
            "name": "location",
            "description": "The location to get weather for (city name, zip code, or coordinates)",
            "type": "string",
            "required": True,
        },
        "units": {
            "name": "units",
            "description": "The units to use for temperature and other measurements",
            "type": "string",
            "enum": ["metric", "imperial"],
            "default": "metric",
        },
    },
    "requiredParameters": ["location"],
    "returns": {
        "name": "weather",
        "description": "Weather information",
        "type": "object",
        "properties": {
            "temperature": {
                "name": "temperature",
                "description": "Current temperature",
                "type": "number",
                "required": True,
            },
            "feelsLike": {
                "name": "feelsLike",
                "description": "What the temperature feels like",
                "type": "number",
                "required": True,
            },
            "conditions": {
                "name": "conditions",
                "description": "Weather conditions description",
                "type": "string",
                "required": True,
            },
            "humidity": {
                "name": "humidity",
                "description": "Humidity percentage",
                "type": "number",
                "minimum": 0,
                "maximum": 100,
                "required": True,
            },
            "windSpeed": {
                "name": "windSpeed",
                "description": "Wind speed",
                "type": "number",
                "minimum": 0,
                "required": True,
            },
            "forecast": {
                "name": "forecast",
                "description": "Forecast for upcoming days",
                "type": "array",
                "items": {
                    "name": "day",
                    "description": "Forecast for a single day",
                    "type": "object",
                    "properties": {
                        "date": {
                            "name": "date",
                            "description": "The date of the forecast",
                            "type": "string",
                            "format": "date",
                            "required": True,
                        },
                        "high": {
                            "name": "high",
                            "description": "High temperature",
                            "type": "number",
                            "required": True,
                        },
                        "low": {
                            "name": "low",
                            "description": "Low temperature",
                            "type": "number",
                            "required": True,
                        },
                        "conditions": {
                            "name": "conditions",
                            "description": "Weather conditions description",
                            "type": "string",
                            "required": True,
                        },
                    },
                    "required": ["date", "high", "low", "conditions"],
                },
            },
        },
        "required": ["temperature", "feelsLike", "conditions", "humidity", "windSpeed"],
    },
    "tags": ["weather", "external", "api"],
})

BUILTIN_TOOLS: tuple[Tool, ...] = (
    HTTP_REQUEST_TOOL,
    DATABASE_QUERY_TOOL,
    FILE_OPERATION_TOOL,
    WEATHER_TOOL,
)


def register_builtin_tools(registry: ToolRegistry) -> list[Tool]:
    """Register every built-in tool the registry does not already hold."""
    registered = []
    for tool in BUILTIN_TOOLS:
        if registry.has(tool.name):
            logger.debug(f"Built-in tool '{tool.name}' already registered, skipping")
            continue
        registered.append(registry.register(tool))
    return registered


def get_builtin_tool(name: str) -> Tool | None:
    """Get a built-in tool by name."""
    return next((tool for tool in BUILTIN_TOOLS if tool.name == name), None)
