"""Application orchestration entry points."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from logging import getLogger
from typing import TYPE_CHECKING

from traduora_sync.adapters.files import read_bytes
from traduora_sync.adapters.git import show_file_at_revision
from traduora_sync.domain.encoding import decode_translation_map
from traduora_sync.domain.reconciliation import reconcile
from traduora_sync.domain.updates import ALL_KINDS, UpdateReport, apply_approved, plan_updates

if TYPE_CHECKING:
    from collections.abc import Collection, Sequence
    from threading import Event

    from traduora_sync.config.traduora import TraduoraConfig
    from traduora_sync.domain.diff import ChangeKind
    from traduora_sync.domain.ports import ChangeApplier, FileReader, RevisionReader, TermsSource
    from traduora_sync.domain.reconciliation import ClassifiedChange
    from traduora_sync.domain.translations import TranslationMap


log = getLogger(__name__)


@dataclass(frozen=True, slots=True)
class SyncStates:
    """The three translation maps of one reconciliation run."""

    remote: TranslationMap
    local: TranslationMap
    baseline: TranslationMap | None


def load_states(
    config: TraduoraConfig,
    *,
    source: TermsSource,
    read_file: FileReader = read_bytes,
    read_revision: RevisionReader = show_file_at_revision,
) -> SyncStates:
    """Fetch the remote terms, read the local file and, if configured, the baseline."""

    path = config.translation_file
    remote = source.fetch_terms()
    local = decode_translation_map(read_file(path), config.local_encoding, source=path)

    baseline: TranslationMap | None = None
    if config.revision is not None:
        raw = read_revision(config.revision, path)
        baseline = decode_translation_map(
            raw, config.git_encoding, source=f"{path}@{config.revision}"
        )
        log.info("Loaded %s baseline terms from revision %s", len(baseline), config.revision)
    else:
        log.info("No revision configured, skipping sanity checks against a baseline")

    return SyncStates(remote=remote, local=local, baseline=baseline)


def compute_changes(
    config: TraduoraConfig,
    *,
    source: TermsSource,
    read_file: FileReader = read_bytes,
    read_revision: RevisionReader = show_file_at_revision,
) -> list[ClassifiedChange]:
    """Reconcile the remote terms against the local translation file."""

    states = load_states(
        config,
        source=source,
        read_file=read_file,
        read_revision=read_revision,
    )
    classified = reconcile(states.remote, states.local, states.baseline)

    kinds = Counter(entry.change.kind for entry in classified)
    conflicts = sum(1 for entry in classified if entry.is_conflict)
    log.info(
        f"Reconciled {len(states.remote)} remote and {len(states.local)} local terms: "
        f"added={kinds['added']}, removed={kinds['removed']}, updated={kinds['updated']}, "
        f"conflicts={conflicts}"
    )
    return classified


def push_changes(
    classified: Sequence[ClassifiedChange],
    *,
    applier: ChangeApplier,
    kinds: Collection[ChangeKind] = ALL_KINDS,
    include_conflicts: bool = False,
    cancel: Event | None = None,
) -> UpdateReport:
    """Apply the approved subset of ``classified`` to the remote service."""

    plan = plan_updates(classified, kinds=kinds, include_conflicts=include_conflicts)
    skipped = len(classified) - len(plan)
    log.info("Pushing %s changes (%s not selected)", len(plan), skipped)

    report = UpdateReport(apply_approved(plan, applier=applier, cancel=cancel))

    log.info(
        "Finished push: applied=%s, failed=%s, not_attempted=%s",
        report.applied,
        report.failed,
        report.not_attempted,
    )
    return report
