"""
Générateur de métadonnées SEO — version simulée (pas d'appel LLM).
Brancher ici un vrai modèle plus tard ; la signature reste (page_title, site_name).
"""
import logging
import random

from canvas_builder import SeoMetadata

log = logging.getLogger(__name__)

SCORE_RANGE = (85, 99)


def generate_seo_metadata(page_title: str, site_name: str) -> SeoMetadata:
    """Meta title/description + mots-clés déduits du titre de page et du nom du site."""
    seo = SeoMetadata(
        meta_title=f"{page_title} | {site_name} - Premium Solutions",
        meta_description=(
            f"Discover high-quality services and solutions on our {page_title} page. "
            f"{site_name} provides industry-leading expertise tailored for your business success and digital growth."
        ),
        focus_keywords=[
            page_title.lower(), site_name.lower(),
            "premium solutions", "industry leaders", "digital growth",
        ],
        ai_seo_score=random.randint(*SCORE_RANGE),
    )
    log.info("SEO généré pour %s / %s (score %d)", site_name, page_title, seo.ai_seo_score)
    return seo
