"""Salesforce sObject to TypeScript type generator."""

__version__ = "0.1.0"
