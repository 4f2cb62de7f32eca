"""
CV Routes - Section fragments loaded into the index page
"""

from flask import render_template, request, current_app
from utils.content import load_profile, load_experience, load_education, load_projects
from utils.decorators import localized, experience_item_required
from utils.skills import filter_skills
from utils.translations import TRANSLATIONS
from . import cv_bp


@cv_bp.route('/profile')
@localized
def profile(lang):
    """Profile section"""
    return render_template('fragments/profile.html',
                           profile=load_profile(lang),
                           translations=TRANSLATIONS,
                           lang=lang)


@cv_bp.route('/experience')
@localized
def experience(lang):
    """Experience section, every item collapsed"""
    data = load_experience(lang)
    return render_template('fragments/experience.html',
                           items=data.items,
                           translations=TRANSLATIONS,
                           lang=lang)


@cv_bp.route('/experience/detail/<item_id>')
@localized
@experience_item_required
def experience_detail(item, item_id, lang):
    """Expanded view of one experience item"""
    return render_template('fragments/experience_detail.html',
                           item=item,
                           item_id=item_id,
                           translations=TRANSLATIONS,
                           lang=lang)


@cv_bp.route('/experience/collapse/<item_id>')
@localized
@experience_item_required
def experience_collapse(item, item_id, lang):
    """Collapsed summary of one experience item"""
    return render_template('fragments/experience_summary.html',
                           item=item,
                           item_id=item_id,
                           translations=TRANSLATIONS,
                           lang=lang)


@cv_bp.route('/education')
@localized
def education(lang):
    """Education section"""
    data = load_education(lang)
    return render_template('fragments/education.html',
                           items=data.items,
                           translations=TRANSLATIONS,
                           lang=lang)


@cv_bp.route('/projects')
@localized
def projects(lang):
    """Projects section"""
    data = load_projects(lang)
    return render_template('fragments/projects.html',
                           items=data.items,
                           translations=TRANSLATIONS,
                           lang=lang)


@cv_bp.route('/skills')
def skills():
    """Skill tags matching the ``q`` filter"""
    query = request.args.get('q', '')
    matches = filter_skills(query, current_app.config['SKILLS'])
    return render_template('fragments/skills.html', skills=matches)
