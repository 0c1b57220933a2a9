from learnhub.models.resource import Category, Page, Resource, ResourceType

__all__ = ["Category", "Page", "Resource", "ResourceType"]
