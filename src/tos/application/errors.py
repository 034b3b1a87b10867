"""Closed set of failures shared by the order store and the use cases.

Every error carries the HTTP status it maps to and the ``error_cause`` text
rendered in the client-facing envelope.
"""

from __future__ import annotations


class OrderServiceError(Exception):
    status_code: int = 500

    def __init__(self, message: str = "") -> None:
        super().__init__(message)
        self.message = message

    @property
    def error_cause(self) -> str:
        return self.message


class StorageError(OrderServiceError):
    status_code = 500

    @property
    def error_cause(self) -> str:
        return f"Database error -> {self.message}"


class ServerError(OrderServiceError):
    status_code = 500

    @property
    def error_cause(self) -> str:
        return f"Server error -> {self.message}"


class BadRequestError(OrderServiceError):
    status_code = 400

    @property
    def error_cause(self) -> str:
        return f"Bad request -> {self.message}"


class InvalidRequestShapeError(OrderServiceError):
    status_code = 400


class InvalidJsonRequestError(InvalidRequestShapeError):
    @property
    def error_cause(self) -> str:
        return "Bad request -> Json request payload is incorrect"


class InvalidPathRequestError(InvalidRequestShapeError):
    @property
    def error_cause(self) -> str:
        return "Bad request -> parameters in path are incorrect"


class TableNotFoundError(OrderServiceError):
    status_code = 404

    @property
    def error_cause(self) -> str:
        return "Table not found"


class OrderNotFoundError(OrderServiceError):
    status_code = 404

    @property
    def error_cause(self) -> str:
        return "Order not found"
