"""Constants for Device model field names"""


class DeviceFields:
    """Field name constants for Device documents"""
    ID = "id"
    DEVICE_ID = "deviceId"
    NAME = "name"
    TYPE = "type"
    STATUS = "status"
    LOCATION = "location"
    SPECIFICATIONS = "specifications"
    LAST_ONLINE_TIME = "lastOnlineTime"
    LAST_MAINTENANCE_TIME = "lastMaintenanceTime"
    DEPLOYMENT_DATE = "deploymentDate"
    WARRANTY_EXPIRY_DATE = "warrantyExpiryDate"
    FIRMWARE_VERSION = "firmwareVersion"
    MAINTENANCE_CYCLE = "maintenanceCycle"
    CREATED_AT = "createdAt"
    UPDATED_AT = "updatedAt"

    # Dotted paths into embedded documents
    LOCATION_ADDRESS = "location.address"

    # MongoDB specific
    MONGO_ID = "_id"  # MongoDB's internal _id field


class LocationFields:
    """Field name constants for the embedded location document"""
    LONGITUDE = "longitude"
    LATITUDE = "latitude"
    ADDRESS = "address"


class SpecificationFields:
    """Field name constants for the embedded specifications document"""
    MODEL = "model"
    MANUFACTURER = "manufacturer"
    PRODUCTION_DATE = "productionDate"
