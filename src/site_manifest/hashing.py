"""Git blob hashing for file contents."""

import hashlib

# Empty blob id, as printed by `git hash-object /dev/null`
EMPTY_BLOB_HASH = "e69de29bb2d1d6434b8b29ae775ad8c2e48c5391"


def git_blob_header(size: int) -> bytes:
    """Object header git prepends before hashing a blob."""
    return f"blob {size}\0".encode("ascii")


def git_blob_hash(data: bytes) -> str:
    """Compute the git object id of `data`, like `git hash-object` does."""
    h = hashlib.sha1()
    h.update(git_blob_header(len(data)))
    h.update(data)
    return h.hexdigest()
