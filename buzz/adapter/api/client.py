"""HTTP client for the comment API.

Every response is wrapped in an envelope:

    {"success": true, "comments": [...]}
    {"success": true, "comment": {...}}
    {"success": false, "message": "..."}
"""

from typing import Any, Optional

import httpx
import logfire

from buzz.adapter.api.mappers import payload_to_comment
from buzz.adapter.error import CommentApiError, PayloadMappingError
from buzz.domain.model import Comment
from buzz.domain.repository import CommentRepository
from buzz.domain.value import CommentId, SubjectId


class HttpCommentRepository(CommentRepository):
    """Comment repository backed by the remote REST API."""

    def __init__(
        self,
        base_url: str,
        timeout: float = 30.0,
        auth_token: str | None = None,
    ) -> None:
        """Initialize the HTTP comment repository.

        Args:
            base_url: API root, e.g. https://api.example.com/api
            timeout: Per-request timeout in seconds
            auth_token: Bearer token for the signed-in user
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.auth_token = auth_token

    def _headers(self) -> dict[str, str]:
        headers = {"Accept": "application/json"}
        if self.auth_token:
            headers["Authorization"] = f"Bearer {self.auth_token}"
        return headers

    async def _request(
        self, method: str, path: str, json: Optional[dict[str, Any]] = None
    ) -> dict[str, Any]:
        """Send a request and unwrap the response envelope.

        Args:
            method: HTTP method
            path: Path below base_url
            json: Optional JSON body

        Returns:
            Decoded envelope with success=true

        Raises:
            CommentApiError: On transport error, non-2xx status,
                undecodable body or success=false
        """
        url = f"{self.base_url}{path}"
        try:
            async with httpx.AsyncClient() as client:
                response = await client.request(
                    method,
                    url,
                    json=json,
                    headers=self._headers(),
                    timeout=self.timeout,
                )
        except httpx.HTTPError as e:
            logfire.error(
                "Comment API HTTP error", method=method, url=url, error=str(e)
            )
            raise CommentApiError(f"HTTP error calling {method} {path}: {e}")

        if response.status_code < 200 or response.status_code >= 300:
            logfire.error(
                "Comment API request failed",
                method=method,
                url=url,
                status_code=response.status_code,
                error=response.text,
            )
            raise CommentApiError(
                f"{method} {path} failed: {response.status_code}",
                status_code=response.status_code,
            )

        try:
            body = response.json()
        except ValueError as e:
            raise CommentApiError(
                f"{method} {path} returned invalid JSON",
                status_code=response.status_code,
            ) from e

        if not isinstance(body, dict) or not body.get("success"):
            message = body.get("message") if isinstance(body, dict) else None
            logfire.warn(
                "Comment API reported failure",
                method=method,
                url=url,
                message=message,
            )
            raise CommentApiError(
                message or f"{method} {path} was not successful",
                status_code=response.status_code,
            )

        return body

    async def fetch_comments(self, subject_id: SubjectId) -> list[Comment]:
        """Fetch all top-level comments for a subject.

        Raises:
            CommentApiError: If the request fails or the payload is invalid
        """
        body = await self._request("GET", f"/comments/{subject_id}")
        try:
            return [payload_to_comment(item) for item in body.get("comments") or []]
        except PayloadMappingError as e:
            raise CommentApiError(str(e)) from e

    async def create_comment(
        self,
        subject_id: SubjectId,
        content: str,
        parent_id: Optional[CommentId] = None,
    ) -> Comment:
        """Create a comment or a reply.

        Raises:
            CommentApiError: If the request fails or the payload is invalid
        """
        body = await self._request(
            "POST",
            "/comments",
            json={"postId": subject_id, "content": content, "parentId": parent_id},
        )
        if not isinstance(body.get("comment"), dict):
            raise CommentApiError("Create response has no comment")
        try:
            return payload_to_comment(body["comment"])
        except PayloadMappingError as e:
            raise CommentApiError(str(e)) from e

    async def delete_comment(self, comment_id: CommentId) -> None:
        """Delete a comment.

        Raises:
            CommentApiError: If the request fails
        """
        await self._request("DELETE", f"/comments/{comment_id}")
