"""
Recipe Metadata Client

Fetches current title, link, image and excerpt for saved recipes from the
host site. A single attempt per call; every failure surfaces as
MetadataFetchError so callers can fall back to stored data.
"""

import logging

import requests

logger = logging.getLogger(__name__)

METADATA_FIELDS = ('id', 'title', 'slug', 'url', 'image', 'excerpt')


class MetadataFetchError(Exception):
    """Raised when recipe metadata cannot be fetched or understood."""
    pass


class RecipeMetadataClient:
    """POSTs recipe ids to the host's metadata endpoint."""

    ACTION = 'get_recipe_data'

    def __init__(self, url, timeout=10, session=None):
        self.url = url
        self.timeout = timeout
        self.session = session or requests.Session()

    def fetch(self, recipe_ids):
        """
        Fetch metadata for recipe_ids.

        Returns:
            List of {id, title, slug, url, image, excerpt} dicts

        Raises:
            MetadataFetchError: on transport errors, bad JSON, or a reply
                with success false
        """
        if not recipe_ids:
            return []

        payload = {'action': self.ACTION, 'post_ids[]': list(recipe_ids)}
        try:
            response = self.session.post(self.url, data=payload, timeout=self.timeout)
            response.raise_for_status()
            body = response.json()
        except requests.RequestException as e:
            raise MetadataFetchError(f"Request failed: {e}") from e
        except ValueError as e:
            raise MetadataFetchError(f"Response is not JSON: {e}") from e

        if not isinstance(body, dict) or not body.get('success'):
            raise MetadataFetchError("Metadata request was not successful")

        records = body.get('data') or []
        if not isinstance(records, list):
            raise MetadataFetchError("Metadata payload is not a list")

        recipes = [
            {field: record.get(field, '') for field in METADATA_FIELDS}
            for record in records
            if isinstance(record, dict) and record.get('id') is not None
        ]
        logger.debug("Fetched metadata for %d of %d recipes", len(recipes), len(recipe_ids))
        return recipes
