from django.contrib import admin
from django.contrib.auth.admin import UserAdmin
from users.models import User, PaymentProfile


class PaymentProfileInline(admin.StackedInline):
    model = PaymentProfile
    can_delete = False


@admin.register(User)
class AuctionUserAdmin(UserAdmin):
    list_display = ['username', 'email', 'role', 'money_spent', 'auctions_won']
    list_filter = ['role', 'is_staff']
    fieldsets = UserAdmin.fieldsets + (
        ('Auction', {'fields': ('phone', 'address', 'role', 'money_spent', 'auctions_won', 'unpaid_commission')}),
    )
    inlines = [PaymentProfileInline]
