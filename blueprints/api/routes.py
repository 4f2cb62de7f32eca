"""
API Routes - Proxied repository statistics
"""

import requests
from flask import abort, jsonify, current_app
from utils.github import fetch_repo_stats, is_valid_repo
from . import api_bp


@api_bp.route('/github-stats/<path:repo>')
def github_stats(repo):
    """Star and fork counts for a GitHub repository"""
    if not is_valid_repo(repo):
        abort(400, description='Invalid repository')
    try:
        stats = fetch_repo_stats(repo)
    except requests.RequestException as e:
        current_app.logger.error(f"Error fetching GitHub stats for {repo}: {str(e)}")
        abort(500, description='Failed to fetch stats')
    return jsonify(stats)
