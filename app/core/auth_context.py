"""
Acting identity capability.

``AuthContext`` carries the authenticated user for the current request and
answers the owner-vs-viewer question.  Components that care about identity
changes (e.g. :class:`app.sync.profile_sync.ProfileSync`) subscribe to it
explicitly and release the subscription when done.
"""

from __future__ import annotations

from typing import Callable, Optional

from app.models.user import User

IdentityListener = Callable[[Optional[User]], None]


class AuthContext:
    """Holds the acting user and notifies subscribers when it changes."""

    def __init__(self, user: Optional[User] = None):
        self._user = user
        self._listeners: list[IdentityListener] = []

    @property
    def user(self) -> Optional[User]:
        return self._user

    @property
    def user_id(self) -> Optional[int]:
        return self._user.id if self._user else None

    @property
    def is_authenticated(self) -> bool:
        return self._user is not None

    def is_owner(self, user_id: int) -> bool:
        """True if the acting user owns the profile keyed by *user_id*."""
        return self._user is not None and self._user.id == user_id

    def set_user(self, user: Optional[User]) -> None:
        """Replace the acting user (sign-in / sign-out) and notify listeners."""
        previous = self.user_id
        self._user = user
        if previous != self.user_id:
            for listener in list(self._listeners):
                listener(user)

    def subscribe(self, listener: IdentityListener) -> Callable[[], None]:
        """Register *listener*; returns a callable that unsubscribes it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe
