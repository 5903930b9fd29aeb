from indexsync.domain.shared.job import Job


class ClearIndexJob(Job):
    """Remove every document from one search index."""

    index_name: str
