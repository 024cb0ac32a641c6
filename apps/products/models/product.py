from django.db import models


class Product(models.Model):
    """Product taking part in the bonus points programme"""
    name = models.CharField(max_length=200)
    price = models.DecimalField(max_digits=12, decimal_places=2)
    discount = models.DecimalField(
        max_digits=12, decimal_places=2, null=True, blank=True,
        help_text="Current discount amount; a discounted product earns no bonus points"
    )
    is_advertised = models.BooleanField(default=False)

    create_time = models.DateTimeField(auto_now_add=True)
    update_time = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'products'
        indexes = [
            models.Index(fields=['create_time'], name='products_create_time_idx'),
        ]

    def __str__(self):
        return f"{self.name} (id: {self.id})"

    @property
    def is_discounted(self):
        return self.discount is not None
