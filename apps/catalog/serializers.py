"""Item master serializers."""

from rest_framework import serializers


class SchoolPathSerializer(serializers.Serializer):
    """Hierarchy the inventory document lives under."""
    adminId    = serializers.CharField()
    districtId = serializers.CharField()
    schoolId   = serializers.CharField()


class ItemCodeRequestSerializer(serializers.Serializer):
    orgnNatCd = serializers.CharField(required=False, allow_blank=True)
    itemTyCd  = serializers.CharField(required=False, allow_blank=True)
    pkgUnitCd = serializers.CharField(required=False, allow_blank=True)
    qtyUnitCd = serializers.CharField(required=False, allow_blank=True)
