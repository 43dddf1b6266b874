"""List databases or collections command."""

from collections.abc import Iterator

from ..StageResult import StageResult
from ._output_models import StoreCollectionsOutput, StoreDatabasesOutput
from .DocumentStore import DocumentStore
from .DocumentStoreError import DocumentStoreError
from .StoreConfig import StoreConfig


def _output(database: str | None, names: list[str], errors: list[str]) -> dict:
    if database:
        return StoreCollectionsOutput(errors=errors, database=database, collections=names).model_dump(mode="python")
    return StoreDatabasesOutput(errors=errors, databases=names).model_dump(mode="python")


def cmd_list(store_config: StoreConfig, database: str | None = None) -> StageResult:
    """List database names, or the collection names of ``database`` when given."""
    scope = "collections" if database else "databases"

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.3, "Connecting to store...")
        try:
            with DocumentStore(store_config) as store:
                yield (0.6, f"Listing {scope}...")
                names = store.collection_names(database) if database else store.database_names()
        except DocumentStoreError as e:
            yield (1.0, "Complete")
            result_obj.result = f"Failed to list {scope}: {e}"
            result_obj.output = _output(database, [], [str(e)])
            result_obj.success = False
            return

        yield (1.0, "Complete")
        result_obj.result = f"Found {len(names)} {scope[:-1]}(s)"
        result_obj.output = _output(database, names, [])
        result_obj.success = True

    return StageResult(
        announce=f"Listing {scope}...",
        progress_callback=do_work,
    )
