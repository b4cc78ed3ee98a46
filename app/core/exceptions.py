# custom exceptions raised by services, converted to HTTP errors at the endpoints


class LocationAgentException(Exception):
    status_code = 400

    def __init__(self, message: str, code: str = "INTERNAL_ERROR"):
        self.message = message
        self.code = code
        super().__init__(self.message)


class LocationNotFoundException(LocationAgentException):
    status_code = 404

    def __init__(self, query: str):
        self.query = query
        super().__init__(f"Location '{query}' not found", code="LOCATION_NOT_FOUND")


class InvalidLocationException(LocationAgentException):
    status_code = 422

    def __init__(self, message: str = "Invalid coordinates"):
        super().__init__(message, code="INVALID_LOCATION")


class GeocodingServiceException(LocationAgentException):
    status_code = 502

    def __init__(self, message: str = "Geocoding service is unavailable"):
        super().__init__(message, code="GEOCODING_UNAVAILABLE")


class ToolNotFoundException(LocationAgentException):
    status_code = 404

    def __init__(self, tool_id: str):
        self.tool_id = tool_id
        super().__init__(f"Unknown tool '{tool_id}'", code="TOOL_NOT_FOUND")
