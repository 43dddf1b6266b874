"""Update document by equality command."""

from collections.abc import Iterator
from typing import Any

from ..StageResult import StageResult
from ._open_collection import _open_collection
from ._output_models import StoreUpdateOutput
from .DocumentStoreError import DocumentStoreError
from .StoreConfig import StoreConfig


def cmd_update(
    store_config: StoreConfig,
    database: str,
    collection: str,
    match: tuple[str, Any],
    change: tuple[str, Any],
) -> StageResult:
    """Set ``change`` on the first document matching ``match``.

    A run that matches nothing still succeeds but reports a warning.
    """

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.2, "Connecting to store...")
        try:
            with _open_collection(store_config, database, collection) as store:
                yield (0.6, "Updating document...")
                outcome = store.update_by_equality(match, change)
        except DocumentStoreError as e:
            yield (1.0, "Complete")
            result_obj.result = f"Update failed: {e}"
            result_obj.output = StoreUpdateOutput(
                errors=[str(e)],
                database=database,
                collection=collection,
                filter=dict([match]),
                update=dict([change]),
            ).model_dump(mode="python")
            result_obj.success = False
            return

        yield (1.0, "Complete")
        warnings = [] if outcome.matched else [f"No document where {match[0]} == {match[1]!r}"]
        result_obj.result = f"Matched {outcome.matched_count}, modified {outcome.modified_count} document(s)"
        result_obj.output = StoreUpdateOutput(
            warnings=warnings,
            database=database,
            collection=collection,
            filter=dict([match]),
            **outcome.to_dict(),
        ).model_dump(mode="python")
        result_obj.success = True

    return StageResult(
        announce=f"Updating {database}.{collection}...",
        progress_callback=do_work,
    )
