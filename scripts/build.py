import logging

from tagpages.dependencies import load_snapshot
from tagpages.exporter import export_site
from tagpages.settings import settings

logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper()),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

if __name__ == "__main__":
    try:
        posts = load_snapshot()
        export_site(posts, settings.EXPORT_DIR, max_workers=settings.BUILD_WORKERS)
        logger.info("Build completed successfully.")
    except Exception as e:
        logger.error(f"Build failed: {e}", exc_info=True)
