"""Reference data — valid ranges, ID conventions and column aliases.

Shared by the validators and the ingestion column mapper so both sides agree
on what a well-formed roster looks like.
"""

# ──────────────────────────────────────────────────────────────────────
# VALUE RANGES (inclusive)
# ──────────────────────────────────────────────────────────────────────

PRIORITY_LEVEL_RANGE: tuple[int, int] = (1, 5)
QUALIFICATION_LEVEL_RANGE: tuple[int, int] = (1, 10)
MIN_DURATION = 1
MIN_PHASE = 1


# ──────────────────────────────────────────────────────────────────────
# IDENTIFIER CONVENTIONS
# ──────────────────────────────────────────────────────────────────────

# Prefix used when an upload row has no identifier, e.g. third client → C003
ID_PREFIXES: dict[str, str] = {
    "clients": "C",
    "workers": "W",
    "tasks": "T",
}

ID_PAD_WIDTH = 3


# ──────────────────────────────────────────────────────────────────────
# COLUMN ALIASES (normalised header → canonical column)
# ──────────────────────────────────────────────────────────────────────

COLUMN_ALIASES: dict[str, dict[str, str]] = {
    "clients": {
        "id": "ClientID",
        "clientid": "ClientID",
        "client": "ClientID",
        "name": "ClientName",
        "clientname": "ClientName",
        "priority": "PriorityLevel",
        "prioritylevel": "PriorityLevel",
        "level": "PriorityLevel",
        "tasks": "RequestedTaskIDs",
        "requestedtasks": "RequestedTaskIDs",
        "taskids": "RequestedTaskIDs",
        "requestedtaskids": "RequestedTaskIDs",
        "group": "GroupTag",
        "grouptag": "GroupTag",
        "tag": "GroupTag",
        "attributes": "AttributesJSON",
        "attributesjson": "AttributesJSON",
        "metadata": "AttributesJSON",
        "extra": "AttributesJSON",
        "json": "AttributesJSON",
    },
    "workers": {
        "id": "WorkerID",
        "workerid": "WorkerID",
        "worker": "WorkerID",
        "employeeid": "WorkerID",
        "name": "WorkerName",
        "workername": "WorkerName",
        "employeename": "WorkerName",
        "skills": "Skills",
        "skillset": "Skills",
        "capabilities": "Skills",
        "slots": "AvailableSlots",
        "availableslots": "AvailableSlots",
        "phases": "AvailableSlots",
        "availability": "AvailableSlots",
        "maxload": "MaxLoadPerPhase",
        "maxloadperphase": "MaxLoadPerPhase",
        "load": "MaxLoadPerPhase",
        "capacity": "MaxLoadPerPhase",
        "group": "WorkerGroup",
        "workergroup": "WorkerGroup",
        "team": "WorkerGroup",
        "qualification": "QualificationLevel",
        "qualificationlevel": "QualificationLevel",
        "quallevel": "QualificationLevel",
        "level": "QualificationLevel",
        "experience": "QualificationLevel",
    },
    "tasks": {
        "id": "TaskID",
        "taskid": "TaskID",
        "task": "TaskID",
        "name": "TaskName",
        "taskname": "TaskName",
        "title": "TaskName",
        "category": "Category",
        "type": "Category",
        "kind": "Category",
        "duration": "Duration",
        "length": "Duration",
        "time": "Duration",
        "skills": "RequiredSkills",
        "requiredskills": "RequiredSkills",
        "needs": "RequiredSkills",
        "requirements": "RequiredSkills",
        "preferred": "PreferredPhases",
        "preferredphases": "PreferredPhases",
        "phases": "PreferredPhases",
        "timing": "PreferredPhases",
        "concurrent": "MaxConcurrent",
        "maxconcurrent": "MaxConcurrent",
        "parallel": "MaxConcurrent",
    },
}

# Canonical columns holding delimiter-separated lists in uploads
LIST_COLUMNS = {"RequestedTaskIDs", "Skills", "RequiredSkills", "AvailableSlots", "PreferredPhases"}

# List columns whose elements are phase numbers
PHASE_LIST_COLUMNS = {"AvailableSlots", "PreferredPhases"}

# Canonical integer columns with (min, max) clamps applied on ingestion; None = unbounded
INTEGER_COLUMNS: dict[str, tuple] = {
    "PriorityLevel": PRIORITY_LEVEL_RANGE,
    "QualificationLevel": QUALIFICATION_LEVEL_RANGE,
    "MaxLoadPerPhase": (1, None),
    "Duration": (MIN_DURATION, None),
    "MaxConcurrent": (1, None),
}

LIST_DELIMITERS = r"[,;|]"
