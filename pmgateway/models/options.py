"""
Option shapes for grant and delete.

Grant options are an open mapping built around the shared token; delete
options are a closed schema, and any key outside it is rejected before a
request goes out.
"""

from typing import Any, Mapping, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from pmgateway.errors import InvalidKeysError, InvalidOptionsError

GrantAttributes = Union[bool, Mapping[str, Any], None]


def build_grant_options(token: str, attributes: GrantAttributes = None) -> dict[str, Any]:
    """
    Merge caller attributes over ``{"sharedPaymentMethodToken": token}``.

    A boolean is shorthand for ``{"allowVaulting": <bool>}``. The merge is
    shallow and caller keys win on collision.
    """
    if isinstance(attributes, bool):
        attributes = {"allowVaulting": attributes}
    options: dict[str, Any] = {"sharedPaymentMethodToken": token}
    options.update(attributes or {})
    return options


class DeleteOptions(BaseModel):
    """Whitelist of options accepted when deleting a payment method."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    revoke_all_grants: Optional[bool] = Field(default=None, alias="revokeAllGrants")

    @classmethod
    def parse(cls, options: Optional[Mapping[str, Any]]) -> "DeleteOptions":
        """Validate caller options, raising InvalidKeysError for unknown keys."""
        try:
            return cls.model_validate(dict(options or {}))
        except ValidationError as e:
            invalid = [
                str(err["loc"][0])
                for err in e.errors()
                if err["type"] == "extra_forbidden" and err["loc"]
            ]
            if invalid:
                raise InvalidKeysError(invalid) from e
            raise InvalidOptionsError(f"Invalid delete options: {e}") from e

    def query_params(self) -> dict[str, Any]:
        """Wire-named (camelCase, converted at encoding) options that were set."""
        return self.model_dump(by_alias=True, exclude_none=True)
