from django.contrib import admin
from .models import Product


@admin.register(Product)
class ProductAdmin(admin.ModelAdmin):
    list_display = ['id', 'name', 'price', 'discount', 'is_advertised', 'update_time']
    list_filter = ['is_advertised', 'create_time']
    search_fields = ['id', 'name']
    readonly_fields = ['id', 'create_time', 'update_time']
    ordering = ['-create_time']

    fieldsets = (
        ('Basic Information', {
            'fields': ('id', 'name')
        }),
        ('Pricing', {
            'fields': ('price', 'discount')
        }),
        ('Promotion', {
            'fields': ('is_advertised',)
        }),
        ('Timestamps', {
            'fields': ('create_time', 'update_time'),
            'classes': ('collapse',)
        }),
    )
