# outlets/admin.py

from django.contrib import admin

from outlets.models import Brand, Outlet, OutletMembership


@admin.register(Brand)
class BrandAdmin(admin.ModelAdmin):
    list_display = ("name", "slug", "created_at")
    search_fields = ("name", "slug")
    readonly_fields = ("created_at", "updated_at")
    ordering = ("name",)


class OutletMembershipInline(admin.TabularInline):
    model = OutletMembership
    extra = 0
    autocomplete_fields = ("user",)


@admin.register(Outlet)
class OutletAdmin(admin.ModelAdmin):
    list_display = ("name", "code", "brand", "status", "created_at")
    list_filter = ("status", "brand")
    search_fields = ("name", "code", "brand__name")
    readonly_fields = ("created_at", "updated_at")
    ordering = ("brand", "name")
    inlines = (OutletMembershipInline,)


@admin.register(OutletMembership)
class OutletMembershipAdmin(admin.ModelAdmin):
    list_display = ("user", "outlet", "role", "created_at")
    list_filter = ("role", "outlet")
    search_fields = ("user__username", "user__email", "outlet__name")
    ordering = ("outlet", "user")
