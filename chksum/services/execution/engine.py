"""
Checksum execution engine.

Drives one run through CONFIGURING -> RUNNING -> FINALIZING -> SUCCEEDED or
FAILED: digests every entity in input order, hands each entity's results to
every sink, applies the error policy and terminates every sink exactly once.
"""

from __future__ import annotations

import threading
from collections import deque
from collections.abc import Iterator, Sequence
from concurrent.futures import Future, ThreadPoolExecutor
from contextlib import closing

from ...core.exceptions import (
    EngineStateError,
    EntityReadError,
    InvalidConfigurationError,
    SinkWriteError,
)
from ...core.interfaces.logger import ILogger
from ...core.interfaces.sink import DigestSink
from ...core.models.config import ExecutionConfig
from ...core.models.digest import (
    DigestFailure,
    DigestResult,
    Entity,
    RunOutcome,
    RunState,
    SinkFailure,
)
from ...hashing.registry import HashAlgorithmRegistry
from ..digest import DigestComputer, EntityDigests
from ..logging import NullLogger

Computation = EntityDigests | EntityReadError


class ExecutionEngine:
    """
    Computes digests for a fixed list of entities and feeds them to sinks.

    Configuration is validated at construction, so an empty entity list, an
    empty algorithm list or an unknown algorithm fails before anything is
    read. An engine runs once.

    Sinks are only ever touched from the thread calling run(); with
    workers > 1 digests are computed on a thread pool but consumed in input
    order.
    """

    def __init__(
        self,
        config: ExecutionConfig,
        entities: Sequence[Entity],
        sinks: Sequence[DigestSink] = (),
        *,
        registry: HashAlgorithmRegistry | None = None,
        computer: DigestComputer | None = None,
        logger: ILogger | None = None,
    ) -> None:
        """
        Configure a run.

        Args:
            config: Algorithms, error policy and tuning
            entities: Entities to digest, in reporting order
            sinks: Sinks to feed, in registration order
            registry: Algorithm registry (defaults to the built-in registry)
            computer: Digest computer (defaults to one using config.chunk_size)
            logger: Logger for run diagnostics

        Raises:
            InvalidConfigurationError: Empty entity or algorithm list
            UnknownAlgorithmError: An algorithm name cannot be resolved
        """
        self._state = RunState.CONFIGURING
        self._config = config
        self._logger = logger or NullLogger()

        if not config.algorithms:
            raise InvalidConfigurationError("No digest algorithm configured", key="algorithms")
        self._registry = registry or HashAlgorithmRegistry()
        self._strategies = self._registry.resolve_all(config.algorithms)

        self._entities = list(entities)
        if not self._entities:
            raise InvalidConfigurationError("No entity to digest", key="entities")

        self._sinks = list(sinks)
        self._computer = computer or DigestComputer(config.chunk_size, logger=self._logger)

    @property
    def state(self) -> RunState:
        return self._state

    @property
    def algorithms(self) -> list[str]:
        """Canonical names of the configured algorithms, in order."""
        return [s.algorithm_name for s in self._strategies]

    def run(self, cancel: threading.Event | None = None) -> RunOutcome:
        """
        Execute the run.

        Args:
            cancel: Optional event; once set, the run stops like a fail-fast
                abort and is reported as cancelled

        Returns:
            RunOutcome with ordered results, failures and the terminal state

        Raises:
            EngineStateError: If the engine already ran
        """
        if self._state is not RunState.CONFIGURING:
            raise EngineStateError(f"Execution engine cannot run from state {self._state.value}")

        self._state = RunState.RUNNING
        outcome = RunOutcome(state=self._state)
        failed_sinks: set[int] = set()
        aborted = False
        processed = 0

        self._logger.info(
            "Computing %s for %d entit%s (%s)",
            ", ".join(self.algorithms),
            len(self._entities),
            "y" if len(self._entities) == 1 else "ies",
            "fail fast" if self._config.fail_fast else "continue on error",
        )

        with closing(self._computations(cancel)) as computations:
            for entity, computed in computations:
                processed += 1
                results, had_errors = self._record(outcome, entity, computed)
                if had_errors and self._config.fail_fast:
                    aborted = True
                    break
                if results and not self._notify(outcome, entity, results, failed_sinks):
                    aborted = True
                    break
                if _is_set(cancel):
                    break

        if _is_set(cancel) and processed < len(self._entities):
            outcome.cancelled = True
            aborted = True
            self._logger.warning(
                "Run cancelled after %d of %d entities", processed, len(self._entities)
            )

        self._state = RunState.FINALIZING
        outcome.state = self._state
        self._terminate_sinks(outcome, aborted, failed_sinks)

        self._state = self._terminal_state(outcome, aborted)
        outcome.state = self._state
        if outcome.success:
            self._logger.info(
                "Run succeeded: %d digest(s), %d failure(s)",
                len(outcome.results),
                len(outcome.failures),
            )
        else:
            self._logger.error("Run failed with %d error(s)", len(outcome.errors))
        return outcome

    # -------------------------------------------------------------------------
    # Running
    # -------------------------------------------------------------------------

    def _compute(self, entity: Entity) -> Computation:
        try:
            return self._computer.compute(entity, self._strategies)
        except EntityReadError as e:
            return e

    def _computations(self, cancel: threading.Event | None) -> Iterator[tuple[Entity, Computation]]:
        """Yield (entity, computation) pairs in input order."""
        if self._config.workers == 1:
            for entity in self._entities:
                if _is_set(cancel):
                    return
                yield entity, self._compute(entity)
            return

        window = self._config.workers * 2
        remaining = iter(self._entities)
        pending: deque[tuple[Entity, Future[Computation]]] = deque()
        executor = ThreadPoolExecutor(
            max_workers=self._config.workers, thread_name_prefix="chksum-digest"
        )
        try:
            while True:
                while len(pending) < window and not _is_set(cancel):
                    entity = next(remaining, None)
                    if entity is None:
                        break
                    pending.append((entity, executor.submit(self._compute, entity)))
                if not pending:
                    return
                entity, future = pending.popleft()
                yield entity, future.result()
        finally:
            for _, future in pending:
                future.cancel()
            executor.shutdown(wait=True)

    def _record(
        self, outcome: RunOutcome, entity: Entity, computed: Computation
    ) -> tuple[list[DigestResult], bool]:
        """Add one entity's results and failures to the outcome."""
        if isinstance(computed, EntityReadError):
            self._logger.warning("%s", computed.message)
            for strategy in self._strategies:
                outcome.failures.append(
                    DigestFailure(
                        entity=entity,
                        algorithm=strategy.algorithm_name,
                        message=computed.message,
                    )
                )
            return [], True

        results: list[DigestResult] = []
        for strategy in self._strategies:
            name = strategy.algorithm_name
            if name in computed.digests:
                result = DigestResult(entity=entity, algorithm=name, hex_digest=computed.digests[name])
                results.append(result)
                outcome.results.append(result)
            else:
                error = computed.errors[name]
                self._logger.warning("%s: %s", entity.display_name, error.message)
                outcome.failures.append(
                    DigestFailure(entity=entity, algorithm=name, message=error.message)
                )
        return results, not computed.complete

    def _notify(
        self,
        outcome: RunOutcome,
        entity: Entity,
        results: list[DigestResult],
        failed_sinks: set[int],
    ) -> bool:
        """Hand results to every sink. Returns False if a sink failed."""
        for index, sink in enumerate(self._sinks):
            try:
                sink.on_entity_digested(entity, results)
            except Exception as e:
                self._sink_failed(outcome, index, sink, _as_sink_error(sink, e), failed_sinks)
                return False
        return True

    # -------------------------------------------------------------------------
    # Finalizing
    # -------------------------------------------------------------------------

    def _terminate_sinks(self, outcome: RunOutcome, aborted: bool, failed_sinks: set[int]) -> None:
        """Give every sink exactly one terminal call, in registration order."""
        for index, sink in enumerate(self._sinks):
            try:
                if index in failed_sinks or (aborted and sink.supports_discard):
                    if sink.supports_discard:
                        self._logger.debug("Discarding partial output of %s", sink.name)
                        sink.discard()
                else:
                    sink.finalize()
            except Exception as e:
                if index not in failed_sinks:
                    self._sink_failed(outcome, index, sink, _as_sink_error(sink, e), failed_sinks)

    def _sink_failed(
        self,
        outcome: RunOutcome,
        index: int,
        sink: DigestSink,
        error: SinkWriteError,
        failed_sinks: set[int],
    ) -> None:
        failed_sinks.add(index)
        self._logger.error("Sink %s failed: %s", sink.name, error.message)
        outcome.sink_failures.append(SinkFailure(sink=sink.name, message=error.message))

    def _terminal_state(self, outcome: RunOutcome, aborted: bool) -> RunState:
        if aborted or outcome.cancelled or outcome.sink_failures:
            return RunState.FAILED
        if outcome.failures and (self._config.fail_fast or self._config.fail_on_partial):
            return RunState.FAILED
        return RunState.SUCCEEDED


def _as_sink_error(sink: DigestSink, error: Exception) -> SinkWriteError:
    if isinstance(error, SinkWriteError):
        return error
    return SinkWriteError(
        f"Unexpected {type(error).__name__}: {error}", sink=sink.name, cause=error
    )


def _is_set(cancel: threading.Event | None) -> bool:
    return cancel is not None and cancel.is_set()
