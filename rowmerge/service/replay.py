import time
import typing

from loguru import logger

from rowmerge import data

__all__ = ("replay",)


def replay(
    *,
    schema: data.Schema,
    formatter: data.Formatter,
    updates: typing.Iterable[data.RowUpdate],
    on_change: typing.Callable[[data.RowChange], None],
    strict_columns: bool = False,
    skip_rejected: bool = True,
) -> data.ReplayResult | data.Error:
    """Feed row updates, in order, through a TableMerger and hand every change to on_change.

    Stale and duplicate versions are dropped with a warning when skip_rejected is set,
    otherwise they fail the replay like any other merge error.
    """
    start = time.monotonic()
    table = data.TableMerger(schema=schema, formatter=formatter, strict_columns=strict_columns)

    updates_read = 0
    changes_emitted = 0
    unchanged = 0
    rejected = 0

    def _millis() -> int:
        return int((time.monotonic() - start) * 1000)

    logger.info(f"Replaying updates against {len(schema.columns())} columns.")
    try:
        for update in updates:
            updates_read += 1
            try:
                change = table.merge(row_index=update.row_index, row=update.values, version=update.version)
            except (data.StaleVersion, data.DuplicateVersion) as e:
                if not skip_rejected:
                    raise

                rejected += 1
                logger.warning(f"Dropped update for row {update.row_index}: {e!s}")
                continue

            if change is None:
                unchanged += 1
            else:
                changes_emitted += 1
                on_change(change)
    except data.RowMergeError as e:
        logger.error(f"Replay failed on update {updates_read}: {e!s}")

        return data.ReplayResult.failed(
            error_message=str(e),
            execution_millis=_millis(),
            updates_read=updates_read,
            changes_emitted=changes_emitted,
            unchanged=unchanged,
            rejected=rejected,
        )
    except Exception as e:
        logger.error(f"An error occurred while running replay: {e!s}")

        return data.Error.new(f"An error occurred while running service.replay: {e!s}", updates_read=updates_read)

    result = data.ReplayResult.succeeded(
        execution_millis=_millis(),
        updates_read=updates_read,
        changes_emitted=changes_emitted,
        unchanged=unchanged,
        rejected=rejected,
    )

    logger.info(
        f"Replay finished in {result.execution_millis} ms: {updates_read} updates, "
        f"{changes_emitted} changes, {unchanged} unchanged, {rejected} rejected."
    )

    return result
