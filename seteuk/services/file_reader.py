"""
Upload reading for the SeTeuk form.

Each selected file is read fully into memory and base64-encoded on its own
worker; the encoded files are returned in the order they were selected.
No size limit is enforced here.
"""
import base64
import concurrent.futures
import logging

from ..config import DEFAULT_MIME_TYPE, FILE_READ_WORKERS
from ..models import UploadedFile

logger = logging.getLogger(__name__)


def encode_upload(name: str, mime_type: str, raw: bytes) -> UploadedFile:
    """Encode raw file bytes into an UploadedFile."""
    return UploadedFile(
        data=base64.b64encode(raw).decode("ascii"),
        mime_type=mime_type or DEFAULT_MIME_TYPE,
        name=name,
    )


def _read_one(storage) -> UploadedFile:
    raw = storage.read()
    return encode_upload(storage.filename or "", storage.mimetype, raw)


def read_uploads(storages: list) -> list:
    """
    Read and encode a batch of uploaded files concurrently.

    Args:
        storages: werkzeug FileStorage objects from request.files

    Returns:
        List of UploadedFile in the same order as storages. Any read
        failure propagates to the caller.
    """
    if not storages:
        return []

    encoded = [None] * len(storages)
    workers = min(FILE_READ_WORKERS, len(storages))
    with concurrent.futures.ThreadPoolExecutor(max_workers=workers) as executor:
        future_to_idx = {
            executor.submit(_read_one, storage): i
            for i, storage in enumerate(storages)
        }
        for future in concurrent.futures.as_completed(future_to_idx):
            idx = future_to_idx[future]
            encoded[idx] = future.result()
            logger.info("Read upload %s (%s, %d base64 chars)",
                        encoded[idx].name, encoded[idx].mime_type, len(encoded[idx].data))
    return encoded


def file_kind(mime_type: str) -> str:
    """Icon category for the file list: image, audio, pdf, text or file."""
    if mime_type.startswith('image/'):
        return 'image'
    if mime_type.startswith('audio/'):
        return 'audio'
    if 'pdf' in mime_type:
        return 'pdf'
    if 'text' in mime_type or mime_type == '':
        return 'text'
    return 'file'
