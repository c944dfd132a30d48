from __future__ import annotations

from contextlib import suppress
from pathlib import Path, PurePosixPath
from typing import TYPE_CHECKING, Any, BinaryIO, ClassVar
from uuid import uuid4

import fsspec
import structlog

from domain.exceptions import ComplexDataReadError, StorageError, ValidationError
from domain.value_objects.blob_pointer import StoredBlobPointer
from domain.value_objects.complex_data import ComplexData, PayloadKind
from domain.value_objects.complex_view import ComplexView
from domain.value_objects.mime_type import MimeType

if TYPE_CHECKING:
    from collections.abc import Iterator

    from domain.aggregates.observation import Observation
    from domain.value_objects.complex_data import ComplexPayload

_CHUNK_SIZE = 1024 * 1024
_MAX_SUFFIX = 10_000


class BinaryDataHandler:
    """Store complex obs payloads as plain files under a single storage root.

    A stored file is never overwritten. When the suggested name is taken the
    handler tries ``name_1.ext``, ``name_2.ext`` and so on, creating each
    candidate in exclusive mode so that concurrent saves of the same title each
    get their own file.

    Fetching supports only the raw view, which returns the file bytes as
    ``application/octet-stream`` whatever the content type was at save time.
    """

    SUPPORTED_VIEWS: ClassVar[tuple[ComplexView, ...]] = (ComplexView.RAW,)

    def __init__(
        self,
        root: str | Path,
        *,
        storage_options: dict | None = None,
        logger: Any | None = None,
    ) -> None:
        self.root_url = str(root)
        self.storage_options = storage_options or {}
        self.fs, self.root = fsspec.core.url_to_fs(self.root_url, **self.storage_options)
        self.log = logger or structlog.get_logger(__name__)

    @property
    def supported_views(self) -> tuple[ComplexView, ...]:
        return self.SUPPORTED_VIEWS

    def supports_view(self, view: ComplexView | str) -> bool:
        return view in self.SUPPORTED_VIEWS

    # ------------------------------------------------------------------
    # Store
    # ------------------------------------------------------------------

    def save_obs(self, obs: Observation) -> Observation:
        """Write the observation's in-memory payload to a new file.

        On success ``value_complex`` points at the new file and ``complex_data``
        is cleared. An observation without complex data is returned unchanged.

        Raises:
            StorageError: if the root is missing or the file cannot be written.
                ``value_complex`` is not modified; a partially written file may
                remain on disk.

        """
        complex_data = obs.complex_data
        if complex_data is None:
            self.log.warning(
                "complex_obs.save_skipped",
                obs_id=str(obs.obs_id),
                reason="complex_data is None",
            )
            return obs

        if not self.fs.isdir(self.root):
            msg = f"Complex obs directory does not exist: {self.root_url}"
            raise StorageError(msg)

        filename, out = self._create_output_file(complex_data.title)
        try:
            size = self._write_payload(complex_data.payload, out)
        except (OSError, ValueError) as e:
            msg = f"Failed to write complex obs to the file system: {filename}"
            raise StorageError(msg) from e
        finally:
            with suppress(OSError):
                out.close()

        obs.value_complex = StoredBlobPointer.for_filename(filename).value
        obs.complex_data = None

        self.log.info(
            "complex_obs.saved",
            obs_id=str(obs.obs_id),
            filename=filename,
            size_bytes=size,
        )
        return obs

    def _create_output_file(self, title: str | None) -> tuple[str, BinaryIO]:
        for filename in self._candidate_filenames(title):
            try:
                return filename, self.fs.open(self._path(filename), "xb")
            except FileExistsError:
                self.log.debug("complex_obs.filename_taken", filename=filename)
            except (OSError, ValueError) as e:
                msg = f"Unable to create {filename} in {self.root_url}"
                raise StorageError(msg) from e

        msg = f"No free filename left for {title!r} in {self.root_url}"
        raise StorageError(msg)

    @staticmethod
    def _candidate_filenames(title: str | None) -> Iterator[str]:
        name = PurePosixPath((title or "").replace("\\", "/")).name.strip()
        # "|" separates pointer segments
        name = name.replace(StoredBlobPointer.SEPARATOR, "_")
        if not name or name in {".", ".."}:
            name = uuid4().hex

        yield name

        stem, suffix = PurePosixPath(name).stem, PurePosixPath(name).suffix
        for n in range(1, _MAX_SUFFIX + 1):
            yield f"{stem}_{n}{suffix}"

    @staticmethod
    def _write_payload(payload: ComplexPayload, out: BinaryIO) -> int:
        if payload.kind is PayloadKind.BYTES:
            out.write(payload.data)
            return len(payload.data)

        size = 0
        while True:
            chunk = payload.stream.read(_CHUNK_SIZE)
            if not chunk:
                break
            out.write(chunk)
            size += len(chunk)
        return size

    # ------------------------------------------------------------------
    # Fetch
    # ------------------------------------------------------------------

    def get_obs(self, obs: Observation, view: ComplexView | str) -> Observation | None:
        """Attach the stored file to the observation in the requested view.

        Returns None for any view but the raw one, leaving the observation alone.
        A missing pointer or unreadable file is logged and leaves
        ``complex_data`` unset; the observation is still returned.
        """
        if not self.supports_view(view):
            self.log.debug("complex_obs.view_unsupported", obs_id=str(obs.obs_id), view=str(view))
            return None

        try:
            pointer = self._pointer_for(obs)
            data = self.read_bytes(pointer.filename)
        except ComplexDataReadError:
            self.log.exception(
                "complex_obs.read_failed",
                obs_id=str(obs.obs_id),
                value_complex=obs.value_complex,
            )
            obs.complex_data = None
            return obs

        complex_data = ComplexData.from_bytes(pointer.display_title, data)
        obs.complex_data = complex_data.with_mime_type(MimeType.OCTET_STREAM.value)
        assert obs.complex_data is not None, "Complex data must not be None"  # noqa: S101

        self.log.debug(
            "complex_obs.fetched",
            obs_id=str(obs.obs_id),
            filename=pointer.filename,
            size_bytes=obs.complex_data.length,
        )
        return obs

    def read_bytes(self, filename: str) -> bytes:
        """Read a stored file whole.

        Raises:
            ComplexDataReadError: if the file is missing or cannot be read.

        """
        path = self._path(filename)
        try:
            return self.fs.cat_file(path)
        except (OSError, ValueError) as e:
            msg = f"Trying to read file: {path}"
            raise ComplexDataReadError(msg) from e

    @staticmethod
    def _pointer_for(obs: Observation) -> StoredBlobPointer:
        if not obs.value_complex:
            msg = f"Observation {obs.obs_id} has no complex data pointer"
            raise ComplexDataReadError(msg)
        try:
            return StoredBlobPointer.parse(obs.value_complex)
        except ValidationError as e:
            raise ComplexDataReadError(str(e)) from e

    def _path(self, filename: str) -> str:
        # only the basename; pointers cannot reach outside the root
        name = PurePosixPath(filename.replace("\\", "/")).name
        return f"{self.root.rstrip('/')}/{name}"
