"""Exceptions raised outside the relevance core."""


class NarrativeBuilderError(Exception):
    """Base exception for the narrative builder."""

    pass


class UnknownPoolError(NarrativeBuilderError):
    """Requested vocabulary pool does not exist."""

    def __init__(self, name: str):
        super().__init__(f"Unknown vocabulary pool: {name}")
        self.name = name


class SessionNotFoundError(NarrativeBuilderError):
    """No saved session with the given id."""

    def __init__(self, session_id: str):
        super().__init__(f"Session not found: {session_id}")
        self.session_id = session_id


class InvalidSessionIdError(NarrativeBuilderError):
    """Session id cannot be used as a file name in the session store."""

    def __init__(self, session_id: str):
        super().__init__(f"Invalid session id: {session_id!r}")
        self.session_id = session_id


class CorruptSessionError(SessionNotFoundError):
    """A saved session file exists but cannot be read."""

    def __init__(self, session_id: str):
        NarrativeBuilderError.__init__(self, f"Saved session is unreadable: {session_id}")
        self.session_id = session_id
