"""
Content Module - Loads localized CV documents from the content directory
Documents are named <kind>_<lang>.json and are read fresh on every request.
A document that cannot be read or decoded is replaced wholesale by the
default-language document, and by an empty document when that fails too.
"""

import os
from dataclasses import dataclass
from enum import Enum

from flask import current_app

from models import CONTENT_MODELS
from .language import DEFAULT_LANGUAGE


class LoadSource(str, Enum):
    """Where a loaded document came from"""
    PRIMARY = 'primary'
    FALLBACK = 'fallback'
    EMPTY = 'empty'


@dataclass(frozen=True)
class LoadResult:
    document: object
    source: LoadSource
    language: str

    @property
    def used_fallback(self):
        return self.source is LoadSource.FALLBACK

    @property
    def is_empty(self):
        return self.source is LoadSource.EMPTY


def document_name(kind, lang):
    """Build the file name of a content document"""
    return f"{kind}_{lang}.json"


def read_document(kind, lang, content_dir):
    """
    Read and decode one content document

    Raises:
        OSError: The file is missing or unreadable
        ValueError: The file is not valid UTF-8 or does not match its model
            (pydantic's ValidationError is a ValueError)
    """
    model = CONTENT_MODELS[kind]
    path = os.path.join(content_dir, document_name(kind, lang))
    with open(path, 'r', encoding='utf-8') as f:
        raw = f.read()
    return model.model_validate_json(raw)


def load_content(kind, lang, content_dir=None, default_lang=None):
    """
    Load a localized content document, never raising to the caller

    Args:
        kind (str): One of profile, experience, education, projects
        lang (str): Requested language
        content_dir (str, optional): Directory holding the documents,
            defaults to the CONTENT_DIR setting
        default_lang (str, optional): Fallback language,
            defaults to the DEFAULT_LANGUAGE setting

    Returns:
        LoadResult: The document and whether it is primary, fallback or empty
    """
    if kind not in CONTENT_MODELS:
        raise KeyError(f"Unknown content kind: {kind}")

    content_dir = content_dir or current_app.config['CONTENT_DIR']
    default_lang = default_lang or current_app.config.get('DEFAULT_LANGUAGE', DEFAULT_LANGUAGE)

    try:
        document = read_document(kind, lang, content_dir)
        return LoadResult(document, LoadSource.PRIMARY, lang)
    except (OSError, ValueError) as e:
        current_app.logger.error(f"Error loading {document_name(kind, lang)}: {str(e)}")

    if lang != default_lang:
        current_app.logger.warning(f"Falling back to {document_name(kind, default_lang)}")
        try:
            document = read_document(kind, default_lang, content_dir)
            return LoadResult(document, LoadSource.FALLBACK, default_lang)
        except (OSError, ValueError) as e:
            current_app.logger.error(f"Error loading fallback {document_name(kind, default_lang)}: {str(e)}")

    return LoadResult(CONTENT_MODELS[kind](), LoadSource.EMPTY, lang)


def load_profile(lang):
    return load_content('profile', lang).document


def load_experience(lang):
    return load_content('experience', lang).document


def load_education(lang):
    return load_content('education', lang).document


def load_projects(lang):
    return load_content('projects', lang).document
