import logging
from contextlib import asynccontextmanager

from ats_scoring.core.config import get_scoring_config
from ats_scoring.scoring.engine import get_default_weights
from ats_scoring.standards.catalog import get_default_catalog
from ats_scoring.taxonomy.keywords import get_default_taxonomy

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app):
    config = get_scoring_config()
    taxonomy = get_default_taxonomy()
    catalog = get_default_catalog()
    weights = get_default_weights()
    logger.info(
        "ats_tables_warmed sectors=%s vendors=%s job_boards=%s config_sections=%s weights=%s",
        len(taxonomy.industries),
        len(catalog.vendors),
        len(catalog.job_boards),
        len(config),
        weights.model_dump(),
    )
    yield
