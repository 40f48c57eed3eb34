"""
Identity resolver - attributes a registration collision to one field.

The check is advisory: it is not atomic with the later insert, so the
storage schema's unique constraints remain the authoritative guard and
the repository reports their violations as DuplicateIdentity too.
"""

from .ports import DuplicateField, IdentityRepository
from .rules import RegistrationData


def resolve_duplicate(
    identity: RegistrationData, repository: IdentityRepository
) -> DuplicateField | None:
    """
    Find which unique field, if any, an existing account already holds.

    Issues a single email-OR-user-name lookup and inspects only the
    first record returned.

    Args:
        identity: Sanitized registration data
        repository: Storage collaborator

    Returns:
        DuplicateField.EMAIL if the record shares the email,
        DuplicateField.USER_NAME if it matched otherwise, None if no match
    """
    existing = repository.find_by_email_or_user_name(identity.email, identity.user_name)
    if existing is None:
        return None
    if existing.email == identity.email:
        return DuplicateField.EMAIL
    return DuplicateField.USER_NAME
