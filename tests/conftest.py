"""
Pytest configuration and fixtures
"""

import json

import pytest

from app import create_app


EXPERIENCE_EN = {
    'items': [
        {'title': 'Backend Engineer', 'company': 'Acme', 'period': '2022 - Present',
         'description': ['Built billing services', 'Ran the on-call rotation']},
        {'title': 'Developer', 'company': 'Globex', 'period': '2019 - 2022',
         'description': ['Shipped the reporting dashboard']},
        {'title': 'Intern', 'company': 'Initech', 'period': '2018',
         'description': []},
    ]
}

EXPERIENCE_FR = {
    'items': [
        {'title': 'Ingénieur Backend', 'company': 'Acme', 'period': '2022 - Aujourd\'hui',
         'description': ['Services de facturation', 'Astreintes']},
        {'title': 'Développeur', 'company': 'Globex', 'period': '2019 - 2022',
         'description': ['Tableau de bord']},
        {'title': 'Stagiaire', 'company': 'Initech', 'period': '2018',
         'description': []},
    ]
}

DOCUMENTS = {
    'profile_en.json': {'title': 'Jane Doe - Engineer', 'text': 'Builds reliable services.'},
    'profile_fr.json': {'title': 'Jane Doe - Ingénieure', 'text': 'Construit des services fiables.'},
    'experience_en.json': EXPERIENCE_EN,
    'experience_fr.json': EXPERIENCE_FR,
    # No French education on purpose: French requests fall back to English
    'education_en.json': {'items': [
        {'title': 'MSc Computer Science', 'institution': 'TU Delft', 'period': '2015 - 2017'},
    ]},
    'projects_en.json': {'items': [
        {'title': 'ledgerline', 'description': 'Event store',
         'link': 'https://github.com/jdoe/ledgerline'},
        {'title': 'notes', 'description': 'Personal notes app', 'link': ''},
    ]},
    'projects_fr.json': {'items': [
        {'title': 'ledgerline', 'description': 'Un event store',
         'link': 'https://github.com/jdoe/ledgerline'},
    ]},
}


def write_document(directory, name, payload):
    path = directory / name
    if isinstance(payload, str):
        path.write_text(payload, encoding='utf-8')
    else:
        path.write_text(json.dumps(payload, ensure_ascii=False), encoding='utf-8')
    return path


@pytest.fixture()
def content_dir(tmp_path):
    """A content directory populated with English and French documents"""
    directory = tmp_path / 'data'
    directory.mkdir()
    for name, payload in DOCUMENTS.items():
        write_document(directory, name, payload)
    return directory


@pytest.fixture()
def app(content_dir):
    app = create_app('testing')
    app.config.update(CONTENT_DIR=str(content_dir))
    yield app


@pytest.fixture()
def client(app):
    return app.test_client()
