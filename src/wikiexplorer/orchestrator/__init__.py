from wikiexplorer.orchestrator.nearby import NearbyOrchestrator
from wikiexplorer.orchestrator.observable import CancellationToken, Observable
from wikiexplorer.orchestrator.search import SearchOrchestrator

__all__ = [
    "CancellationToken",
    "NearbyOrchestrator",
    "Observable",
    "SearchOrchestrator",
]
