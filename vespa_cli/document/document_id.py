"""
Document Identifiers.

A document id has the form id:<namespace>:<document-type>::<user-specified-id>.
The user-specified part may itself contain colons. Ids map to the path of
the document in the /document/v1 REST API.
"""

from dataclasses import dataclass
from urllib.parse import quote

from vespa_cli.core.exceptions import ParseError

ID_PREFIX = "id:"
DOCUMENT_API_PATH = "document/v1"


@dataclass(frozen=True)
class DocumentId:
    namespace: str
    document_type: str
    user_id: str

    @classmethod
    def parse(cls, raw: str) -> "DocumentId":
        """
        Parse a document id string.

        Raises:
            ParseError: If the prefix, namespace, document type, group
                separator or user-specified id is missing
        """
        if not raw.startswith(ID_PREFIX):
            raise ParseError(raw, "must start with 'id:'")

        fields = raw[len(ID_PREFIX):].split(":", 3)
        if len(fields) < 4:
            raise ParseError(raw, "expected id:<namespace>:<document-type>::<id>")

        namespace, document_type, group, user_id = fields
        if not namespace:
            raise ParseError(raw, "namespace is empty")
        if not document_type:
            raise ParseError(raw, "document type is empty")
        if group:
            raise ParseError(raw, f"unsupported key/value part '{group}'")
        if not user_id:
            raise ParseError(raw, "user-specified id is empty")

        return cls(namespace=namespace, document_type=document_type, user_id=user_id)

    def to_url_path(self) -> str:
        """Path of this document relative to the document service root."""
        # Only unreserved characters survive, so '/' and ':' in the user id are encoded.
        encoded = quote(self.user_id, safe="")
        return f"{DOCUMENT_API_PATH}/{self.namespace}/{self.document_type}/docid/{encoded}"

    def __str__(self) -> str:
        return f"{ID_PREFIX}{self.namespace}:{self.document_type}::{self.user_id}"
