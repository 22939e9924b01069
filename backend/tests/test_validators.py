"""Per-check behaviour of the data-driven validators."""

import pytest

from alchemist.validators.concurrency_validator import ConcurrencyValidator
from alchemist.validators.duplicate_id_validator import DuplicateIdValidator
from alchemist.validators.json_validator import JsonValidator
from alchemist.validators.malformed_list_validator import MalformedListValidator
from alchemist.validators.phase_saturation_validator import PhaseSaturationValidator
from alchemist.validators.range_validator import RangeValidator
from alchemist.validators.reference_validator import ReferenceValidator
from alchemist.validators.required_columns_validator import RequiredColumnsValidator
from alchemist.validators.skill_coverage_validator import SkillCoverageValidator
from alchemist.validators.workload_validator import WorkloadValidator

from helpers import clean_context, make_client, make_context, make_task, make_worker


ALL_DATA_VALIDATORS = [
    RequiredColumnsValidator,
    DuplicateIdValidator,
    MalformedListValidator,
    RangeValidator,
    JsonValidator,
    ReferenceValidator,
    WorkloadValidator,
    PhaseSaturationValidator,
    SkillCoverageValidator,
    ConcurrencyValidator,
]


@pytest.mark.parametrize("validator_cls", ALL_DATA_VALIDATORS)
def test_empty_collections_produce_no_findings(validator_cls):
    assert validator_cls().validate(make_context()) == []


@pytest.mark.parametrize("validator_cls", ALL_DATA_VALIDATORS)
def test_clean_roster_produces_no_findings(validator_cls):
    assert validator_cls().validate(clean_context()) == []


# -----------------------------
# REQUIRED COLUMNS
# -----------------------------
def test_missing_client_id_is_error():
    ctx = make_context(clients=[make_client(ClientID="")])
    [finding] = RequiredColumnsValidator().validate(ctx)

    assert finding.severity == "error"
    assert finding.category == "Required Columns"
    assert finding.entity == "clients"
    assert finding.row_index == 0
    assert finding.column == "ClientID"
    assert finding.id == "client-id-0"


def test_missing_client_name_is_warning():
    ctx = make_context(clients=[make_client(), make_client(ClientID="C002", ClientName="")])
    [finding] = RequiredColumnsValidator().validate(ctx)

    assert finding.severity == "warning"
    assert finding.row_index == 1
    assert finding.column == "ClientName"


def test_missing_worker_and_task_ids():
    ctx = make_context(workers=[make_worker(WorkerID="")], tasks=[make_task(TaskID="")])
    findings = RequiredColumnsValidator().validate(ctx)

    assert [(f.entity, f.column) for f in findings] == [
        ("workers", "WorkerID"),
        ("tasks", "TaskID"),
    ]
    assert all(f.severity == "error" for f in findings)


# -----------------------------
# DUPLICATE IDS
# -----------------------------
def test_every_row_sharing_a_duplicate_id_is_flagged():
    ctx = make_context(
        clients=[
            make_client(ClientID="C1"),
            make_client(ClientID="C2"),
            make_client(ClientID="C1"),
            make_client(ClientID="C1"),
        ]
    )
    findings = DuplicateIdValidator().validate(ctx)

    assert [f.row_index for f in findings] == [0, 2, 3]
    assert [f.id for f in findings] == [
        "duplicate-client-C1-0",
        "duplicate-client-C1-2",
        "duplicate-client-C1-3",
    ]
    assert all(f.message == "Duplicate ClientID: C1" for f in findings)


def test_duplicates_checked_for_all_three_collections():
    ctx = make_context(
        clients=[make_client(ClientID="X"), make_client(ClientID="X")],
        workers=[make_worker(WorkerID="X"), make_worker(WorkerID="X")],
        tasks=[make_task(TaskID="X"), make_task(TaskID="X")],
    )
    findings = DuplicateIdValidator().validate(ctx)

    assert [(f.entity, f.row_index) for f in findings] == [
        ("clients", 0), ("clients", 1),
        ("workers", 0), ("workers", 1),
        ("tasks", 0), ("tasks", 1),
    ]


def test_empty_ids_are_not_duplicates():
    ctx = make_context(clients=[make_client(ClientID=""), make_client(ClientID="")])
    assert DuplicateIdValidator().validate(ctx) == []


# -----------------------------
# MALFORMED LISTS
# -----------------------------
@pytest.mark.parametrize(
    "slots",
    [[0], [0.5], [1, -2], [1, "x"], ["2"], [float("nan")], [float("inf")], [True]],
)
def test_invalid_slots_flag_the_field_once(slots):
    ctx = make_context(workers=[make_worker(AvailableSlots=[1] + slots)])
    [finding] = MalformedListValidator().validate(ctx)

    assert finding.id == "malformed-slots-0"
    assert finding.column == "AvailableSlots"
    assert finding.severity == "error"


def test_fractional_slot_at_least_one_is_accepted():
    ctx = make_context(workers=[make_worker(AvailableSlots=[1, 2.5])])
    assert MalformedListValidator().validate(ctx) == []


# -----------------------------
# RANGE VALUES
# -----------------------------
@pytest.mark.parametrize("priority", [0, 6, -1, 100])
def test_priority_out_of_range(priority):
    ctx = make_context(clients=[make_client(PriorityLevel=priority)])
    [finding] = RangeValidator().validate(ctx)

    assert finding.column == "PriorityLevel"
    assert finding.row_index == 0
    assert finding.category == "Out of Range Values"


@pytest.mark.parametrize("priority", [1, 2, 3, 4, 5])
def test_priority_in_range(priority):
    ctx = make_context(clients=[make_client(PriorityLevel=priority)])
    assert RangeValidator().validate(ctx) == []


def test_duration_below_one():
    ctx = make_context(tasks=[make_task(), make_task(TaskID="T2", Duration=0)])
    [finding] = RangeValidator().validate(ctx)

    assert finding.id == "duration-range-1"
    assert finding.entity == "tasks"
    assert finding.column == "Duration"


# -----------------------------
# BROKEN JSON
# -----------------------------
@pytest.mark.parametrize("value", ["{bad json", "NaN", '{"a": Infinity}', "-Infinity", "[1, NaN]"])
def test_broken_json_is_flagged(value):
    ctx = make_context(clients=[make_client(AttributesJSON=value)])
    [finding] = JsonValidator().validate(ctx)

    assert finding.category == "Broken JSON"
    assert finding.row_index == 0
    assert finding.column == "AttributesJSON"
    assert finding.evidence


def test_non_json_constant_is_named_in_evidence():
    ctx = make_context(clients=[make_client(AttributesJSON='{"score": Infinity}')])
    [finding] = JsonValidator().validate(ctx)
    assert "Infinity" in finding.evidence


@pytest.mark.parametrize("value", ["", "{}", '{"vip": true}', "[1, 2]", "3"])
def test_empty_or_valid_json_is_accepted(value):
    ctx = make_context(clients=[make_client(AttributesJSON=value)])
    assert JsonValidator().validate(ctx) == []


def test_whitespace_only_json_is_broken():
    ctx = make_context(clients=[make_client(AttributesJSON="   ")])
    assert len(JsonValidator().validate(ctx)) == 1


# -----------------------------
# UNKNOWN REFERENCES
# -----------------------------
def test_unknown_task_reference_with_no_tasks():
    ctx = make_context(clients=[make_client(RequestedTaskIDs=["T999"])])
    [finding] = ReferenceValidator().validate(ctx)

    assert finding.severity == "error"
    assert "T999" in finding.message
    assert finding.id == "unknown-task-0-T999"


def test_one_finding_per_client_and_missing_task():
    ctx = make_context(
        clients=[
            make_client(RequestedTaskIDs=["T001", "T404", "T405", "T404"]),
            make_client(ClientID="C002", RequestedTaskIDs=["T404"]),
        ],
        tasks=[make_task()],
    )
    findings = ReferenceValidator().validate(ctx)

    assert [f.id for f in findings] == [
        "unknown-task-0-T404",
        "unknown-task-0-T405",
        "unknown-task-1-T404",
    ]


# -----------------------------
# OVERLOADED WORKERS
# -----------------------------
def test_worker_with_fewer_slots_than_load():
    ctx = make_context(workers=[make_worker(AvailableSlots=[1, 2], MaxLoadPerPhase=3)])
    [finding] = WorkloadValidator().validate(ctx)

    assert finding.severity == "warning"
    assert finding.column == "MaxLoadPerPhase"


def test_worker_with_matching_slots_and_load_is_fine():
    ctx = make_context(workers=[make_worker(AvailableSlots=[1, 2, 3], MaxLoadPerPhase=3)])
    assert WorkloadValidator().validate(ctx) == []


def test_worker_with_no_slots_is_overloaded():
    ctx = make_context(workers=[make_worker(AvailableSlots=[], MaxLoadPerPhase=1)])
    assert len(WorkloadValidator().validate(ctx)) == 1


# -----------------------------
# PHASE SLOT SATURATION
# -----------------------------
def _saturation_roster(first_duration: int):
    workers = [
        make_worker(WorkerID="W1", AvailableSlots=[1, 2, 3], MaxLoadPerPhase=3),
        make_worker(WorkerID="W2", AvailableSlots=[2, 3], MaxLoadPerPhase=2),
    ]
    tasks = [
        make_task(TaskID="T1", Duration=first_duration, PreferredPhases=[2]),
        make_task(TaskID="T2", Duration=3, PreferredPhases=[2]),
    ]
    return make_context(workers=workers, tasks=tasks)


def test_saturated_phase_reports_required_and_available():
    [finding] = PhaseSaturationValidator().validate(_saturation_roster(first_duration=5))

    assert finding.id == "phase-saturation-2"
    assert finding.severity == "warning"
    assert finding.row_index is None
    assert finding.column is None
    assert finding.message == "Phase 2 requires 8 slots but only 5 are available"
    assert finding.evidence == "phase=2 required=8 available=5"


def test_reducing_demand_clears_saturation():
    assert PhaseSaturationValidator().validate(_saturation_roster(first_duration=2)) == []


def test_phase_with_no_workers_has_zero_capacity():
    ctx = make_context(workers=[make_worker(AvailableSlots=[1])], tasks=[make_task(PreferredPhases=[4, 2])])
    findings = PhaseSaturationValidator().validate(ctx)

    assert [f.id for f in findings] == ["phase-saturation-2", "phase-saturation-4"]
    assert findings[0].message == "Phase 2 requires 1 slots but only 0 are available"


def test_repeated_phase_counts_once_per_entity():
    ctx = make_context(
        workers=[make_worker(AvailableSlots=[1, 1], MaxLoadPerPhase=1)],
        tasks=[make_task(PreferredPhases=[1, 1], Duration=2)],
    )
    [finding] = PhaseSaturationValidator().validate(ctx)
    assert finding.evidence == "phase=1 required=2 available=1"


def test_fractional_phases_do_not_count_toward_saturation():
    ctx = make_context(
        workers=[make_worker(AvailableSlots=[2.5], MaxLoadPerPhase=1)],
        tasks=[
            make_task(TaskID="T1", PreferredPhases=[2.5], Duration=4),
            make_task(TaskID="T2", PreferredPhases=[2.0], Duration=1),
        ],
    )
    findings = PhaseSaturationValidator().validate(ctx)

    # 2.0 is phase 2; the 2.5 entries add neither demand nor capacity
    assert [f.evidence for f in findings] == ["phase=2 required=1 available=0"]


# -----------------------------
# SKILL COVERAGE
# -----------------------------
def test_uncovered_skill_is_reported_once_per_task():
    ctx = make_context(
        workers=[make_worker(Skills=["python"])],
        tasks=[make_task(RequiredSkills=["python", "Rust", "Go"])],
    )
    [finding] = SkillCoverageValidator().validate(ctx)

    assert finding.category == "Skill Coverage"
    assert finding.severity == "error"
    assert finding.message == "Required skills not available: Rust, Go"


def test_adding_a_worker_with_the_skill_removes_the_finding():
    tasks = [make_task(RequiredSkills=["Rust"])]
    without = make_context(workers=[make_worker()], tasks=tasks)
    with_rust = make_context(workers=[make_worker(), make_worker(WorkerID="W2", Skills=["Rust"])], tasks=tasks)

    assert len(SkillCoverageValidator().validate(without)) == 1
    assert SkillCoverageValidator().validate(with_rust) == []


def test_skill_matching_is_case_sensitive():
    ctx = make_context(workers=[make_worker(Skills=["rust"])], tasks=[make_task(RequiredSkills=["Rust"])])
    assert len(SkillCoverageValidator().validate(ctx)) == 1


# -----------------------------
# MAX CONCURRENCY FEASIBILITY
# -----------------------------
def test_concurrency_exceeding_qualified_workers():
    ctx = make_context(
        workers=[make_worker(Skills=["X"]), make_worker(WorkerID="W2", Skills=["Y"])],
        tasks=[make_task(RequiredSkills=["X"], MaxConcurrent=3)],
    )
    [finding] = ConcurrencyValidator().validate(ctx)

    assert finding.severity == "warning"
    assert finding.column == "MaxConcurrent"
    assert finding.message == "MaxConcurrent (3) exceeds qualified workers (1)"


def test_adding_qualified_workers_clears_concurrency_warning():
    workers = [make_worker(WorkerID=f"W{i}", Skills=["X", "Z"]) for i in range(3)]
    ctx = make_context(workers=workers, tasks=[make_task(RequiredSkills=["X"], MaxConcurrent=3)])
    assert ConcurrencyValidator().validate(ctx) == []


def test_qualified_worker_needs_every_required_skill():
    ctx = make_context(
        workers=[make_worker(Skills=["X"]), make_worker(WorkerID="W2", Skills=["X", "Y"])],
        tasks=[make_task(RequiredSkills=["X", "Y"], MaxConcurrent=2)],
    )
    [finding] = ConcurrencyValidator().validate(ctx)
    assert finding.evidence == "MaxConcurrent=2, qualified=1"


def test_task_without_required_skills_counts_every_worker():
    ctx = make_context(
        workers=[make_worker(), make_worker(WorkerID="W2", Skills=[])],
        tasks=[make_task(RequiredSkills=[], MaxConcurrent=2)],
    )
    assert ConcurrencyValidator().validate(ctx) == []
