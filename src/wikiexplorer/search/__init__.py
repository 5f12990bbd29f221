from wikiexplorer.search.base import ArticleSource
from wikiexplorer.search.wikipedia import WikipediaClient

__all__ = [
    "ArticleSource",
    "WikipediaClient",
]
