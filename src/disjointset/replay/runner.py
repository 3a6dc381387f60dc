"""Apply parsed operations to a disjoint-set forest."""

from collections.abc import Iterable

from disjointset.audit.logger import AuditLogger
from disjointset.errors import ElementNotFoundError
from disjointset.forest import DisjointSet
from disjointset.replay.config import ReplayConfig, ReplayResult
from disjointset.replay.models import Operation, OperationResult, OpKind

__all__ = ["apply_operation", "replay"]


def apply_operation(forest: DisjointSet, operation: Operation) -> OperationResult:
    """Apply one operation to forest.

    Parameters
    ----------
    forest : DisjointSet
        Target forest, mutated in place.
    operation : Operation
        Operation to apply.

    Returns
    -------
    OperationResult
        The structure's return value. ``found`` is False when find/union
        named an unregistered element.
    """
    if operation.kind is OpKind.MAKE:
        forest.make_set(operation.args[0])
        return OperationResult(operation=operation, result=None)

    if operation.kind is OpKind.FIND:
        result = forest.find(operation.args[0])
    else:
        result = forest.union(*operation.args)

    # Script tokens are never None, so None always means not found
    return OperationResult(operation=operation, result=result, found=result is not None)


def replay(
    operations: Iterable[Operation],
    config: ReplayConfig | None = None,
    logger: AuditLogger | None = None,
    forest: DisjointSet | None = None,
) -> ReplayResult:
    """Replay operations against a forest.

    Parameters
    ----------
    operations : Iterable[Operation]
        Parsed operations, applied in order.
    config : ReplayConfig | None, optional
        Replay configuration. If None, uses defaults (strict).
    logger : AuditLogger | None, optional
        Audit logger for tracking. If None, no logging.
    forest : DisjointSet | None, optional
        Forest to replay into. If None, a fresh one is created.

    Returns
    -------
    ReplayResult
        Per-operation results and final counters.

    Raises
    ------
    ElementNotFoundError
        In strict mode, when find/union names an unregistered element.
    """
    if config is None:
        config = ReplayConfig()
    if forest is None:
        forest = DisjointSet()

    results: list[OperationResult] = []
    not_found = 0

    for operation in operations:
        outcome = apply_operation(forest, operation)

        if not outcome.found:
            missing = next(arg for arg in operation.args if arg not in forest)
            if config.strict:
                error = ElementNotFoundError(missing, line_number=operation.line_number)
                if logger:
                    logger.error(
                        type(error).__name__,
                        str(error),
                        op=operation.kind.value,
                        line=operation.line_number,
                    )
                raise error
            not_found += 1
            if logger:
                logger.element_not_found(
                    operation.kind.value, operation.line_number, operation.args
                )
        elif logger:
            logger.operation_applied(
                operation.kind.value,
                operation.line_number,
                operation.args,
                outcome.result,
            )

        results.append(outcome)

    return ReplayResult(
        operations_applied=len(results),
        not_found=not_found,
        elements=len(forest),
        partitions=forest.partition_count,
        results=results,
    )
