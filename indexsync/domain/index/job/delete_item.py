from indexsync.domain.shared.job import Job


class DeleteItemJob(Job):
    """Remove one record from the search index.

    Carries only the record identity: the record itself may already be
    deleted from storage by the time the job runs.
    """

    record_type: str
    record_id: str
    versioned: bool = False
