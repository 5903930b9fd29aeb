from indexsync.domain.shared.job import Job


class IndexItemJob(Job):
    """Push one record into the search index."""

    record_type: str
    record_id: str
