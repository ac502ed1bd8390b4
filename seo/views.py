"""
SEO Views - Crawler-facing pages served next to the API.

GET /sitemap.xml   static frontend pages plus one entry per hero
GET /hero/<id>     the SPA index.html with the hero's Open Graph tags filled in
"""

import logging
from pathlib import Path

from django.conf import settings
from django.http import HttpResponse, HttpResponseNotFound
from django.utils import timezone
from django.utils.html import escape
from django.views import View

from api.exceptions import NotFoundError
from core.domain import frontend_url
from heroes.models import Hero
from heroes.services import find_hero_by_slug

logger = logging.getLogger(__name__)

STATIC_PAGES = ('', '/register', '/heroes', '/legal')

FALLBACK_TITLE = 'SuperFix - Find a local hero'
FALLBACK_DESCRIPTION = 'The platform of local heroes.'
FALLBACK_IMAGE_PATH = '/og-default.jpg'


class SitemapView(View):
    """Generate the sitemap of the public frontend."""

    def get(self, request):
        now = timezone.now()

        urls = []

        for page in STATIC_PAGES:
            urls.append({
                'loc': frontend_url(page),
                'changefreq': 'daily',
                'priority': '0.8',
            })

        for hero_id in Hero.objects.values_list('id', flat=True):
            urls.append({
                'loc': frontend_url(f'/hero/{hero_id}'),
                'lastmod': now.strftime('%Y-%m-%d'),
                'changefreq': 'weekly',
                'priority': '1.0',
            })

        # Build XML
        xml_content = '<?xml version="1.0" encoding="UTF-8"?>\n'
        xml_content += '<urlset xmlns="http://www.sitemaps.org/schemas/sitemap/0.9">\n'

        for url_info in urls:
            xml_content += '  <url>\n'
            for key, value in url_info.items():
                xml_content += f'    <{key}>{escape(value)}</{key}>\n'
            xml_content += '  </url>\n'

        xml_content += '</urlset>'

        return HttpResponse(xml_content, content_type='application/xml')


def hero_meta(hero) -> dict:
    """Open Graph title, description and image for a hero (or the site)."""
    site = settings.SUPERFIX['PUBLIC_SITE_URL'].rstrip('/')

    if hero is None:
        return {
            'title': FALLBACK_TITLE,
            'description': FALLBACK_DESCRIPTION,
            'image': f'{site}{FALLBACK_IMAGE_PATH}',
        }

    avatar = hero.avatar_url or ''
    image = avatar if avatar.startswith('http') else f'{site}{avatar or FALLBACK_IMAGE_PATH}'
    rate = f' Rate: {hero.hourly_rate} RON/h.' if hero.hourly_rate is not None else ''

    return {
        'title': f'{hero.alias} - {hero.category} | SuperFix',
        'description': f'Need a {hero.category}? {hero.alias} can help!{rate}',
        'image': image,
    }


class HeroPreviewView(View):
    """
    Serve the frontend shell with per-hero link-preview metadata, so shared
    hero links render a proper card. Unknown heroes get the site defaults.
    """

    def get(self, request, pk):
        index_path = Path(settings.SUPERFIX['SPA_INDEX_PATH'])
        if not index_path.is_file():
            logger.error(f"SPA index not found at {index_path}")
            return HttpResponseNotFound('index.html is missing on the server.')

        try:
            hero = find_hero_by_slug(pk)
        except NotFoundError:
            hero = None

        meta = hero_meta(hero)
        html = index_path.read_text(encoding='utf-8')
        html = (
            html
            .replace('__META_TITLE__', escape(meta['title']))
            .replace('__META_DESCRIPTION__', escape(meta['description']))
            .replace('__META_IMAGE__', escape(meta['image']))
        )

        return HttpResponse(html, content_type='text/html; charset=utf-8')
