"""Shared describe payloads for tests."""

import json

import pytest


ACCOUNT_DESCRIBE = {
    "name": "Account",
    "label": "Account",
    "fields": [
        {"name": "Id", "type": "id", "calculated": False},
        {"name": "Name", "type": "string", "calculated": False},
        {"name": "IsDeleted", "type": "boolean", "calculated": False},
        {"name": "AnnualRevenue", "type": "currency", "calculated": False},
        {"name": "Score__c", "type": "double", "calculated": True},
        {"name": "CreatedDate", "type": "datetime", "calculated": False},
        {"name": "Phone", "type": "phone", "calculated": False},
        {"name": "Description", "type": "textarea", "calculated": False},
        {"name": "Industry", "type": "picklist", "calculated": False},
        {
            "name": "OwnerId",
            "type": "reference",
            "calculated": False,
            "referenceTo": ["User"],
            "relationshipName": "Owner",
        },
        {
            "name": "ParentId",
            "type": "reference",
            "calculated": False,
            "referenceTo": ["Account"],
            "relationshipName": "Parent",
        },
    ],
    "childRelationships": [
        {
            "childSObject": "Contact",
            "relationshipName": "Contacts",
            "junctionReferenceTo": [],
        },
        {
            "childSObject": "Case",
            "relationshipName": "Cases",
            "junctionReferenceTo": [],
        },
        {
            "childSObject": "FeedItem",
            "relationshipName": None,
            "junctionReferenceTo": [],
        },
    ],
}

CONTACT_DESCRIBE = {
    "name": "Contact",
    "fields": [
        {"name": "Id", "type": "id", "calculated": False},
        {"name": "LastName", "type": "string", "calculated": False},
        {"name": "Birthdate", "type": "date", "calculated": False},
        {
            "name": "AccountId",
            "type": "reference",
            "calculated": False,
            "referenceTo": ["Account"],
            "relationshipName": "Account",
        },
    ],
    "childRelationships": [
        {
            "childSObject": "Case",
            "relationshipName": "Cases",
            "junctionReferenceTo": [],
        },
        {
            "childSObject": "Asset",
            "relationshipName": "Assets",
            "junctionReferenceTo": [],
        },
    ],
}

ACCOUNT_BLOCK = """\
export interface Account extends SObjectAttribute<'Account'> {
  Name: string;
  IsDeleted: boolean;
  AnnualRevenue: number;
  Score__c: number; // calculated
  CreatedDate: DateString | null;
  Phone: PhoneString;
  Description: string;
  Industry: string; // picklist
  OwnerId: ID;
  ParentId: ID;
  Parent: Account;
  Contacts: ChildRecords<Contact, 'Contact'>;
  Cases: ChildRecords<Case, 'Case'>;
};"""

CONTACT_BLOCK = """\
export interface Contact extends SObjectAttribute<'Contact'> {
  LastName: string;
  Birthdate: DateString | null;
  AccountId: ID;
  Account: Account;
  Cases: ChildRecords<Case, 'Case'>;
  Assets: ChildRecords<Asset, 'Asset'>;
};"""


@pytest.fixture
def account_describe():
    return json.loads(json.dumps(ACCOUNT_DESCRIBE))


@pytest.fixture
def contact_describe():
    return json.loads(json.dumps(CONTACT_DESCRIBE))


@pytest.fixture
def describe_dir(tmp_path, account_describe, contact_describe):
    """Directory of saved describe results."""
    directory = tmp_path / "describes"
    directory.mkdir()
    for payload in (account_describe, contact_describe):
        (directory / f"{payload['name']}.json").write_text(json.dumps(payload))
    return directory


@pytest.fixture
def account_block():
    """Account interface as generated with Account and Contact known."""
    return ACCOUNT_BLOCK


@pytest.fixture
def contact_block():
    """Contact interface as generated with Account and Contact known."""
    return CONTACT_BLOCK
