"""Factories for roster entities used across the test suite.

Overrides use the canonical column names, e.g. ``make_client(ClientID="")``.
"""

from alchemist.models.entities import Client, Task, ValidationContext, Worker


def make_client(**overrides) -> Client:
    data = {
        "ClientID": "C001",
        "ClientName": "Acme",
        "PriorityLevel": 3,
        "RequestedTaskIDs": [],
        "GroupTag": "g",
        "AttributesJSON": "{}",
    }
    data.update(overrides)
    return Client.model_validate(data)


def make_worker(**overrides) -> Worker:
    data = {
        "WorkerID": "W001",
        "WorkerName": "Ada",
        "Skills": ["python"],
        "AvailableSlots": [1, 2, 3],
        "MaxLoadPerPhase": 1,
        "WorkerGroup": "g",
        "QualificationLevel": 5,
    }
    data.update(overrides)
    return Worker.model_validate(data)


def make_task(**overrides) -> Task:
    data = {
        "TaskID": "T001",
        "TaskName": "Build",
        "Category": "dev",
        "Duration": 1,
        "RequiredSkills": ["python"],
        "PreferredPhases": [1],
        "MaxConcurrent": 1,
    }
    data.update(overrides)
    return Task.model_validate(data)


def make_context(clients=(), workers=(), tasks=(), rules=None) -> ValidationContext:
    return ValidationContext(
        clients=list(clients),
        workers=list(workers),
        tasks=list(tasks),
        rules=rules,
    )


def clean_context(rules=None) -> ValidationContext:
    """A small roster that passes every check."""
    return make_context(
        clients=[make_client(RequestedTaskIDs=["T001"])],
        workers=[make_worker()],
        tasks=[make_task()],
        rules=rules,
    )


def by_category(findings, category) -> list:
    return [f for f in findings if f.category == category]
