"""
GitHub Module - Repository statistics from the GitHub REST API
"""

import re

import requests
from flask import current_app


REPO_PATTERN = re.compile(r'[A-Za-z0-9_.-]+/[A-Za-z0-9_.-]+')


def _count(payload, field):
    value = payload.get(field, 0)
    if isinstance(value, bool) or not isinstance(value, int):
        return 0
    return value


def is_valid_repo(repo):
    """Check that repo is a plain 'owner/name' pair without dot segments"""
    if not REPO_PATTERN.fullmatch(repo or ''):
        return False
    return all(part not in ('.', '..') for part in repo.split('/'))


def fetch_repo_stats(repo):
    """
    Fetch star and fork counts for a repository

    Args:
        repo (str): Repository identifier, e.g. 'owner/name'

    Returns:
        dict: {'stars': int, 'forks': int}, zero-valued when the
            response body is not the expected JSON object

    Raises:
        ValueError: repo is not a plain 'owner/name' pair
        requests.RequestException: The request could not be completed
    """
    if not is_valid_repo(repo):
        raise ValueError(f"Invalid repository identifier: {repo!r}")

    api_url = current_app.config.get('GITHUB_API_URL', 'https://api.github.com').rstrip('/')
    token = current_app.config.get('GITHUB_TOKEN')
    url = f"{api_url}/repos/{repo}"

    headers = {'Accept': 'application/vnd.github+json'}
    if token:
        headers['Authorization'] = f"token {token}"

    response = requests.get(url, headers=headers,
                            timeout=current_app.config.get('GITHUB_TIMEOUT', 10))

    try:
        payload = response.json()
    except ValueError:
        payload = {}
    if not isinstance(payload, dict):
        payload = {}

    current_app.logger.debug(f"GitHub stats for {repo}: HTTP {response.status_code}")
    return {
        'stars': _count(payload, 'stargazers_count'),
        'forks': _count(payload, 'forks_count'),
    }
