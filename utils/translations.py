"""
Translations Module - Static interface strings for every supported language
"""

from types import MappingProxyType


TRANSLATIONS = MappingProxyType({
    'name_label': {'en': 'Name', 'fr': 'Nom'},
    'email_label': {'en': 'Email', 'fr': 'Email'},
    'message_label': {'en': 'Message', 'fr': 'Message'},
    'send_message': {'en': 'Send Message', 'fr': 'Envoyer le Message'},
    'loading_experience': {'en': 'Loading experience...', 'fr': "Chargement de l'expérience..."},
    'loading_education': {'en': 'Loading education...', 'fr': "Chargement de l'éducation..."},
    'loading_projects': {'en': 'Loading projects...', 'fr': 'Chargement des projets...'},
    'loading_contact': {'en': 'Loading contact form...', 'fr': 'Chargement du formulaire de contact...'},
    'filter_skills': {'en': 'Filter skills...', 'fr': 'Filtrer les compétences...'},
    'professional_experience': {'en': 'Professional Experience', 'fr': 'Expérience Professionnelle'},
    'education': {'en': 'Education', 'fr': 'Éducation'},
    'personal_projects': {'en': 'Personal Projects', 'fr': 'Projets Personnels'},
    'skills': {'en': 'Skills', 'fr': 'Compétences'},
    'contact_me': {'en': 'Contact Me', 'fr': 'Contactez-Moi'},
    'experience': {'en': 'Experience', 'fr': 'Expérience'},
    'projects': {'en': 'Projects', 'fr': 'Projets'},
    'contact': {'en': 'Contact', 'fr': 'Contact'},
    'message_sent': {'en': 'Message sent successfully!', 'fr': 'Message envoyé avec succès !'},
    'failed_send': {'en': 'Failed to send email', 'fr': "Échec de l'envoi de l'email"},
    'all_fields_required': {'en': 'All fields are required', 'fr': 'Tous les champs sont requis'},
    'loading_stats': {'en': 'Loading stats...', 'fr': 'Chargement des statistiques...'},
    'view_on_github': {'en': 'View on GitHub', 'fr': 'Voir sur GitHub'},
    # Template-only strings
    'profile': {'en': 'Profile', 'fr': 'Profil'},
    'show_more': {'en': 'Show more', 'fr': 'Voir plus'},
    'show_less': {'en': 'Show less', 'fr': 'Voir moins'},
    'stars': {'en': 'Stars', 'fr': 'Étoiles'},
    'forks': {'en': 'Forks', 'fr': 'Forks'},
    'language': {'en': 'Language', 'fr': 'Langue'},
    'toggle_theme': {'en': 'Toggle dark mode', 'fr': 'Basculer le mode sombre'},
})


def get_translation(key, lang):
    """
    Look up the display string for a key

    Falls back to English when the language is missing for the key,
    and to the key itself when the key is unknown.
    """
    entry = TRANSLATIONS.get(key)
    if not entry:
        return key
    if lang in entry:
        return entry[lang]
    return entry.get('en', key)
