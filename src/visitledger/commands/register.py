from visitledger.appender import register_subject
from visitledger.config import open_store
from visitledger.models import SubjectProfile


def register(subject_id: str, name: str, category: str, description: str, force: bool) -> None:
    store = open_store()
    profile = SubjectProfile(name=name, category=category, description=description)
    _ = register_subject(store, subject_id, profile, overwrite=force)
    print(f"Registered subject: {subject_id}")
