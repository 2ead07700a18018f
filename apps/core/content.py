"""
Public website content: per-section defaults and merge-on-save storage.
"""

import copy
import logging

from .models import WebsiteContent

logger = logging.getLogger(__name__)

Section = WebsiteContent.Section

FEATURES_COUNT = 3

DEFAULT_CONTENT = {
    Section.HERO: {
        'title': "Welcome to CampusConnect Academy",
        'subtitle': (
            "Nurturing bright futures through excellence in education, community, and "
            "character development. Discover the difference at CampusConnect Academy."
        ),
        'cta_button_1_text': "Learn More About Us",
        'cta_button_1_link': "/about/",
        'cta_button_2_text': "Admissions Inquiry",
        'cta_button_2_link': "/contact/",
    },
    Section.ABOUT: {
        'page_title': "About CampusConnect Academy",
        'page_subtitle': (
            "Discover our rich history, educational philosophy, and the values that guide "
            "CampusConnect Academy."
        ),
        'story_title': "Our Story",
        'story_paragraph_1': (
            "Founded on the principles of academic excellence and holistic development, "
            "CampusConnect Academy is dedicated to providing a supportive and challenging "
            "environment where students explore their passions and become lifelong learners."
        ),
        'story_paragraph_2': (
            "Our educators are committed to nurturing each student's individual talents. "
            "CampusConnect Academy is a community where students, parents, and faculty "
            "collaborate to create an enriching educational experience."
        ),
        'mission_title': "Our Mission",
        'mission_statement': (
            "To provide an exceptional educational experience that empowers students to "
            "achieve academic excellence and become responsible global citizens."
        ),
        'vision_title': "Our Vision",
        'vision_statement': (
            "To be a leading educational institution recognized for innovative teaching "
            "and a vibrant community."
        ),
        'leadership_title': "Meet Our Leadership Team",
    },
    Section.FEATURES: {
        'page_title': "Why Choose CampusConnect Academy?",
        'features': [
            {
                'title': "Holistic Education",
                'description': "Our curriculum focuses on academic rigor, character development, and extracurricular enrichment.",
            },
            {
                'title': "Engaged Parent Community",
                'description': "We foster strong partnerships with parents through open communication and involvement.",
            },
            {
                'title': "Dedicated Faculty",
                'description': "Our experienced educators are passionate about nurturing each student's potential.",
            },
        ],
    },
    Section.PROGRAMS: {
        'page_title': "Our Academic & Extracurricular Programs",
        'page_subtitle': (
            "We offer a diverse range of programs designed to nurture well-rounded "
            "individuals, prepared for future success."
        ),
    },
}


# Program cards on the public Programs page; only the page heading is editable.
PROGRAM_LISTINGS = [
    {
        'title': "Core Academics Program",
        'description': (
            "Our comprehensive curriculum for core subjects like Mathematics, Science, English, "
            "and Social Studies is designed to foster critical thinking, creativity, and a "
            "lifelong love for learning. Includes advanced placement opportunities and "
            "personalized learning paths."
        ),
    },
    {
        'title': "STEM & Innovation Hub",
        'description': (
            "Our STEM program focuses on Science, Technology, Engineering, and Mathematics "
            "with hands-on projects, coding bootcamps, robotics competitions, and preparation "
            "for future tech careers."
        ),
    },
    {
        'title': "Arts & Humanities Enrichment",
        'description': (
            "We nurture creativity and cultural understanding through visual arts, music, "
            "drama, literature, and debate clubs, encouraging students to express themselves "
            "and appreciate diverse perspectives."
        ),
    },
    {
        'title': "Sports & Athletics Development",
        'description': (
            "Promoting physical fitness, teamwork, and discipline, our athletics program offers "
            "a variety of sports, expert coaching, and inter-school competitions."
        ),
    },
]

def _merge_features(stored_features):
    """Pad or fill the features list so it always has FEATURES_COUNT entries."""
    defaults = DEFAULT_CONTENT[Section.FEATURES]['features']
    merged = []
    for index in range(FEATURES_COUNT):
        item = {
            'title': f"Feature {index + 1}",
            'description': f"Default description for feature {index + 1}",
        }
        if index < len(defaults):
            item.update(defaults[index])
        if stored_features and index < len(stored_features) and isinstance(stored_features[index], dict):
            item.update({k: v for k, v in stored_features[index].items() if v})
        merged.append(item)
    return merged


def get_section(key):
    """
    Return the content for a section: stored values layered over defaults.
    A missing record yields the defaults.
    """
    content = copy.deepcopy(DEFAULT_CONTENT[key])
    record = WebsiteContent.objects.filter(key=key).first()
    if record and isinstance(record.data, dict):
        content.update({k: v for k, v in record.data.items() if k != 'features'})
        if key == Section.FEATURES:
            content['features'] = _merge_features(record.data.get('features'))
    return content


def save_section(key, data):
    """
    Merge ``data`` into the stored section, creating it when missing.
    Keys absent from ``data`` keep their stored value.
    """
    record, created = WebsiteContent.objects.get_or_create(key=key)
    merged = dict(record.data or {})
    merged.update(data)
    record.data = merged
    record.save()
    logger.info(f"Website content '{key}' {'created' if created else 'updated'}")
    return record
