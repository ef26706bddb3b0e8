"""
Google Drive storage for submitted documents.

Files are grouped into one folder per session date, directly under a
configured root folder.
"""

import io
from typing import Any, Dict, Optional

from google.auth.exceptions import GoogleAuthError
from google.oauth2.credentials import Credentials
from googleapiclient.discovery import build
from googleapiclient.errors import HttpError
from googleapiclient.http import MediaIoBaseUpload

from homework_grader.core.config import get_config, get_root_folder_id, get_secrets
from homework_grader.core.errors import GraderError, UpstreamAPIError, UpstreamAuthError
from homework_grader.core.logging import get_logger

logger = get_logger(__name__)

# Shared by all requests; clients are built per request
_credentials: Optional[Credentials] = None

FOLDER_MIME_TYPE = "application/vnd.google-apps.folder"
TOKEN_URI = "https://oauth2.googleapis.com/token"
DRIVE_SCOPES = ["https://www.googleapis.com/auth/drive"]


def _quote(value: str) -> str:
    """Quote a value for a Drive search query."""
    return "'" + value.replace("\\", "\\\\").replace("'", "\\'") + "'"


def _translate_error(action: str, error: Exception) -> Exception:
    """Map a Google client exception to an upstream error kind."""
    if isinstance(error, GoogleAuthError):
        return UpstreamAuthError(f"Drive authentication failed while {action}: {error}", cause=error)
    if isinstance(error, HttpError) and error.resp.status in (401, 403):
        return UpstreamAuthError(f"Drive rejected credentials while {action}: {error}", cause=error)
    return UpstreamAPIError(f"Drive error while {action}: {error}", cause=error)


def get_drive_credentials() -> Credentials:
    """
    Process-wide OAuth credentials built from the client id/secret and refresh
    token. The access token is fetched and refreshed on demand.
    """
    global _credentials
    if _credentials is None:
        secrets = get_secrets()
        if not (secrets.google_client_id and secrets.google_client_secret and secrets.google_refresh_token):
            raise UpstreamAuthError(
                "Google Drive credentials are not configured "
                "(GOOGLE_CLIENT_ID, GOOGLE_CLIENT_SECRET, GOOGLE_REFRESH_TOKEN)"
            )
        _credentials = Credentials(
            token=None,
            refresh_token=secrets.google_refresh_token,
            client_id=secrets.google_client_id,
            client_secret=secrets.google_client_secret,
            token_uri=TOKEN_URI,
            scopes=DRIVE_SCOPES,
        )
    return _credentials


def build_drive_service():
    """
    Build a Drive v3 client on the shared credentials.

    A client owns an httplib2.Http, which is not thread-safe, so each request
    gets its own client. The discovery document is bundled with the library.
    """
    return build("drive", "v3", credentials=get_drive_credentials(), cache_discovery=False)


class DriveStorage:
    """Uploads documents into date-named folders under a root folder."""

    def __init__(self, service: Any, root_folder_id: str, mime_type: str = "application/pdf"):
        self.service = service
        self.root_folder_id = root_folder_id
        self.mime_type = mime_type

    def get_or_create_folder(self, folder_name: str) -> str:
        """
        Return the id of the folder named folder_name directly under the root,
        creating it if none exists.

        Two concurrent calls for a new name may both create a folder; later
        calls reuse the first one Drive returns.
        """
        query = (
            f"name={_quote(folder_name)} and {_quote(self.root_folder_id)} in parents "
            f"and mimeType={_quote(FOLDER_MIME_TYPE)} and trashed=false"
        )
        try:
            search = self.service.files().list(q=query, fields="files(id, name)").execute()
            files = search.get("files", [])
            if files:
                logger.debug("Reusing Drive folder %s (%s)", folder_name, files[0]["id"])
                return files[0]["id"]

            metadata = {
                "name": folder_name,
                "mimeType": FOLDER_MIME_TYPE,
                "parents": [self.root_folder_id],
            }
            created = self.service.files().create(body=metadata, fields="id").execute()
        except (GoogleAuthError, HttpError) as e:
            raise _translate_error(f"resolving folder {folder_name!r}", e) from e

        logger.info("Created Drive folder %s (%s)", folder_name, created["id"])
        return created["id"]

    def upload_file(self, file_name: str, content: bytes, folder_id: str) -> Dict[str, Optional[str]]:
        """
        Upload content as a new file in folder_id.

        Returns:
            Dict with keys id and webViewLink.
        """
        metadata = {"name": file_name, "parents": [folder_id]}
        media = MediaIoBaseUpload(io.BytesIO(content), mimetype=self.mime_type, resumable=False)
        try:
            uploaded = (
                self.service.files()
                .create(body=metadata, media_body=media, fields="id, webViewLink")
                .execute()
            )
        except (GoogleAuthError, HttpError) as e:
            raise _translate_error(f"uploading {file_name!r}", e) from e

        logger.info("Uploaded %s to Drive (%s, %d bytes)", file_name, uploaded["id"], len(content))
        return {"id": uploaded["id"], "webViewLink": uploaded.get("webViewLink")}

    def download_file(self, file_id: str) -> bytes:
        """Return the stored bytes of a file."""
        try:
            return self.service.files().get_media(fileId=file_id).execute()
        except (GoogleAuthError, HttpError) as e:
            raise _translate_error(f"downloading {file_id!r}", e) from e


def get_drive_storage() -> DriveStorage:
    """Return a DriveStorage with a fresh Drive client on the shared credentials."""
    root_folder_id = get_root_folder_id()
    if not root_folder_id:
        raise GraderError("Drive root folder is not configured (GOOGLE_ROOT_FOLDER_ID)")
    return DriveStorage(
        build_drive_service(),
        root_folder_id,
        mime_type=get_config().drive.upload_mime_type,
    )
