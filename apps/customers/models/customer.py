from django.db import models


class Customer(models.Model):
    """Loyalty programme customer, identified by a case-sensitive login"""
    login = models.CharField(max_length=150, unique=True)
    is_premium = models.BooleanField(default=False)
    favorite_product = models.ForeignKey(
        'products.Product',
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='favored_by'
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'customers'
        verbose_name = 'Customer'
        verbose_name_plural = 'Customers'

    def __str__(self):
        return self.login
