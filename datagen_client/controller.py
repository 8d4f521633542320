"""State and behaviour of the request form, independent of any display."""

from __future__ import annotations

import functools
import json
from typing import Any, Callable, NamedTuple

from .fields import Field, FieldType, GenerationRequest, ValidationError
from .network import NetworkWorker

_SEND_TEXT = "Send Request"
_PROCESSING_TEXT = "Processing..."


class _Message(NamedTuple):
    title: str
    text: str
    kind: str


class ClientController:
    """Holds the table definition and drives one generation request at a time.

    The dialog hooks (``get_save_file_name`` and the ``show_*`` methods) are
    meant to be overridden by a front end; the defaults accept the suggested
    file name and keep every message in ``messages``.
    """

    DEFAULT_URL = "http://localhost:8080/generate"

    def __init__(self, worker: Any = None, url: str = DEFAULT_URL) -> None:
        self.request = GenerationRequest()
        self.url = url
        self.response_data = bytearray()
        self.request_successful = False
        self.processing = False
        self.messages: list[_Message] = []
        self.worker = worker if worker is not None else NetworkWorker()
        self.worker.on_data = functools.partial(self._post, self.on_data_received)
        self.worker.on_finished = functools.partial(self._post, self.on_request_finished)
        self.worker.on_error = functools.partial(self._post, self.on_error_occurred)

    @property
    def fields(self) -> list[Field]:
        return self.request.fields

    @property
    def send_button_text(self) -> str:
        return _PROCESSING_TEXT if self.processing else _SEND_TEXT

    @property
    def send_enabled(self) -> bool:
        return not self.processing

    @property
    def cancel_visible(self) -> bool:
        return self.processing

    def _post(self, callback: Callable[..., None], *args: object) -> None:
        """Deliver a worker notification; front ends may defer it."""
        callback(*args)

    def add_field(self) -> Field:
        """Append a new integer field with default parameters."""
        field = Field()
        self.fields.append(field)
        return field

    def remove_field(self, index: int | None) -> None:
        """Remove the field at ``index``; nothing happens when it is None."""
        if index is None:
            return
        del self.fields[index]

    def set_field_type(self, index: int, field_type: FieldType | str) -> None:
        self.fields[index].set_type(field_type)

    def create_json_body(self) -> dict[str, Any]:
        return self.request.to_json()

    def send_request(self) -> bool:
        """Validate and post the request; return whether it was sent."""
        try:
            self.request.validate()
        except ValidationError as exc:
            self.show_warning(exc.title, str(exc))
            return False
        data = json.dumps(self.create_json_body(), indent=4).encode("utf-8")
        self.response_data.clear()
        self.request_successful = False
        self.worker.process_request(
            self.url, data, {"Content-Type": "application/json"}
        )
        self.processing = True
        return True

    def cancel_request(self) -> None:
        self.worker.cancel_request()
        self.processing = False
        self.request_successful = False
        self.response_data.clear()
        self.show_information("Cancelled", "Request has been cancelled.")

    def on_data_received(self, data: bytes) -> None:
        self.response_data.extend(data)
        self.request_successful = True

    def on_request_finished(self) -> None:
        self.processing = False
        if not self.request_successful or not self.response_data:
            self.response_data.clear()
            return
        try:
            file_name = self.get_save_file_name(
                "Save CSV File", self.request.output_file, "CSV Files (*.csv)"
            )
            if not file_name:
                return
            try:
                with open(file_name, "wb") as handle:
                    handle.write(self.response_data)
            except OSError as exc:
                self.show_critical(
                    "File Error", f"Failed to save CSV file: {exc.strerror or exc}"
                )
            else:
                self.show_information("Success", "CSV file saved successfully!")
        finally:
            self.response_data.clear()

    def on_error_occurred(self, error: str) -> None:
        self.processing = False
        self.request_successful = False
        self.show_critical("Network Error", error)
        self.response_data.clear()

    def get_save_file_name(self, caption: str, directory: str, file_filter: str) -> str:
        """Return the path to save to, or an empty string to skip saving."""
        return directory

    def show_warning(self, title: str, text: str) -> None:
        self.messages.append(_Message(title, text, "warning"))

    def show_critical(self, title: str, text: str) -> None:
        self.messages.append(_Message(title, text, "critical"))

    def show_information(self, title: str, text: str) -> None:
        self.messages.append(_Message(title, text, "information"))

    def close(self) -> None:
        self.worker.close()

    def __enter__(self) -> ClientController:
        return self

    def __exit__(self, *_exc: object) -> None:
        self.close()