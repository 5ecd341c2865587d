from django.apps import AppConfig


class ScoringCoreConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'matchday.scoring_core'
    verbose_name = 'Scoring Core Logic'
