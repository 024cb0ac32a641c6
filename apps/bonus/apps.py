from django.apps import AppConfig


class BonusConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'apps.bonus'
    verbose_name = 'Bonus Points'
