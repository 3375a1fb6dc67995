"""Request validation for the VSDC endpoints."""

from rest_framework import serializers


class TaxpayerBranchSerializer(serializers.Serializer):
    tin   = serializers.CharField()
    bhfId = serializers.CharField()


class InitInfoSerializer(TaxpayerBranchSerializer):
    dvcSrNo = serializers.CharField()


class LookupSerializer(serializers.Serializer):
    """selectCodes / selectItemsClass / selectBranches / selectItems — all optional."""
    tin       = serializers.CharField(required=False, allow_blank=True)
    bhfId     = serializers.CharField(required=False, allow_blank=True)
    lastReqDt = serializers.CharField(required=False, allow_blank=True)


class CustomerLookupSerializer(LookupSerializer):
    custmTin = serializers.CharField(required=False, allow_blank=True)


class SalesSerializer(TaxpayerBranchSerializer):
    invcNo   = serializers.IntegerField(min_value=1)
    itemList = serializers.ListField(child=serializers.DictField(), allow_empty=False)


class StockItemsSerializer(TaxpayerBranchSerializer):
    sarNo    = serializers.IntegerField(min_value=1)
    sarTyCd  = serializers.CharField()
    itemList = serializers.ListField(child=serializers.DictField())


class StockMasterSerializer(TaxpayerBranchSerializer):
    itemCd = serializers.CharField()
    rsdQty = serializers.FloatField()
    regrNm = serializers.CharField(required=False, allow_blank=True)
    regrId = serializers.CharField(required=False, allow_blank=True)
    modrNm = serializers.CharField(required=False, allow_blank=True)
    modrId = serializers.CharField(required=False, allow_blank=True)
