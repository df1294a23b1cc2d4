"""
Sample Yodlee REST API bodies for tests.

Success payloads for each endpoint and the three error envelopes, shaped
like the sandbox responses.
"""

BASE_URL = "http://yodlee.test/services/srest/restserver/v1.0"
COBRAND_LOGIN = "sbCobtester"
COBRAND_PASSWORD = "cobrand-secret"
COB_TOKEN = "abc123"
USER_TOKEN = "user-token-789"

COBRAND_LOGIN_RESPONSE = {
    "cobrandId": 10010352,
    "channelId": -1,
    "locale": "en_US",
    "tncVersion": 2,
    "applicationId": "17CBE222A42161A3FF450E47CF4C1A00",
    "cobrandConversationCredentials": {"sessionToken": COB_TOKEN},
    "preferenceInfo": {
        "currencyCode": "USD",
        "timeZone": "PST",
        "dateFormat": "MM/dd/yyyy",
        "currencyNotationType": {"currencyNotationType": "SYMBOL"},
        "numberFormat": {
            "decimalSeparator": ".",
            "groupingSeparator": ",",
            "groupPattern": "###,##0.##",
        },
    },
}

USER_LOGIN_RESPONSE = {
    "userContext": {
        "conversationCredentials": {"sessionToken": USER_TOKEN},
        "valid": True,
        "isPasswordExpired": False,
        "cobrandId": 10010352,
        "channelId": -1,
        "locale": "en_US",
        "tncVersion": 2,
        "applicationId": "17CBE222A42161A3FF450E47CF4C1A00",
        "cobrandConversationCredentials": {"sessionToken": COB_TOKEN},
    },
    "lastLoginTime": 1419839440,
    "loginCount": 7,
    "passwordRecovered": False,
    "emailAddress": "jane@example.com",
    "loginName": "jane@example.com",
    "userId": 10483860,
}

SITE_ACCOUNTS_RESPONSE = [
    {
        "siteAccountId": 10176401,
        "isCustom": False,
        "credentialsChangedTime": 1419839487,
        "retryCount": 0,
        "created": "2014-12-29T00:51:27-0800",
        "siteRefreshInfo": {
            "siteRefreshStatus": {
                "siteRefreshStatusId": 8,
                "siteRefreshStatus": "REFRESH_COMPLETED_WITH_UNCERTAIN_ACCOUNT",
            },
            "siteRefreshMode": {"refreshModeId": 2, "refreshMode": "NORMAL"},
            "updateInitTime": 0,
            "nextUpdate": 1419840387,
            "code": 0,
            "noOfRetry": 0,
        },
        "siteInfo": {
            "popularity": 0,
            "siteId": 16441,
            "orgId": 1148,
            "defaultDisplayName": "Dag Site",
            "defaultOrgDisplayName": "Demo Bank",
            "enabledContainers": [
                {"containerName": "bank", "assetType": 1},
                {"containerName": "credits", "assetType": 2},
            ],
            "contentServiceInfos": [
                {
                    "contentServiceId": 20551,
                    "siteId": 16441,
                    "containerInfo": {"containerName": "bank", "assetType": 1},
                }
            ],
            "baseUrl": "http://64.14.28.129/dag/index.do",
            "loginForms": [],
            "isHeld": False,
            "isCustom": False,
            "siteSearchVisibility": True,
        },
    }
]

TRANSACTION_SEARCH_RESPONSE = {
    "countOfAllTransaction": 2,
    "countOfProjectedTxns": 0,
    "numberOfHits": 2,
    "searchIdentifier": {"identifier": "10483860_2"},
    "creditTotalOfTxns": {"amount": 1200.5, "currencyCode": "USD"},
    "debitTotalOfTxns": {"amount": 45.99, "currencyCode": "USD"},
    "creditTotalOfProjectedTxns": {"amount": 0, "currencyCode": "USD"},
    "debitTotalOfProjectedTxns": {"amount": 0, "currencyCode": "USD"},
    "searchResult": {
        "transactions": [
            {
                "viewKey": {
                    "transactionId": 12001,
                    "containerType": "bank",
                    "rowNumber": 1,
                    "transactionCount": 2,
                    "isParentMatch": False,
                    "isSystemGeneratedSplit": False,
                },
                "postDate": "2014-12-20T00:00:00-0800",
                "amount": {"amount": 1200.5, "currencyCode": "USD"},
                "runningBalance": 0,
                "description": {
                    "description": "PAYROLL DEPOSIT",
                    "simpleDescription": "Payroll",
                    "isOlbUserDescription": False,
                    "viewPref": False,
                },
                "category": {
                    "categoryId": 29,
                    "categoryName": "Paychecks/Salary",
                    "categoryTypeId": 2,
                    "isBusiness": False,
                    "localizedCategoryName": "Paychecks/Salary",
                },
                "status": {
                    "statusId": 1,
                    "description": "posted",
                    "localizedDescription": "posted",
                },
                "account": {
                    "itemAccountId": 10220001,
                    "accountName": "Checking",
                    "accountNumber": "xxxx3xxx",
                    "siteName": "Dag Site",
                    "sumInfoId": 20551,
                    "isAccountName": 1,
                    "itemAccountStatusId": 1,
                    "decryptionStatus": False,
                    "accountBalance": {"amount": 9044.78, "currencyCode": "USD"},
                    "accountDisplayName": {"defaultNormalAccountName": "Dag Site - Checking"},
                },
                "transactionType": "credit",
                "transactionTypeId": 1,
                "transactionBaseType": "credit",
                "transactionBaseTypeId": 1,
                "transactionPostingOrder": 0,
                "isBusiness": False,
                "isMedical": False,
                "isPersonal": True,
                "isReimbursable": False,
                "isTaxable": False,
                "checkNumber": {},
                "memo": {},
            },
            {
                "viewKey": {"transactionId": 12002, "containerType": "credits"},
                "postDate": "2014-12-18T00:00:00-0800",
                "amount": {"amount": 45.99, "currencyCode": "USD"},
                "price": {"amount": 45.99, "currencyCode": "USD"},
                "description": {"description": "GROCERY STORE"},
                "category": {"categoryId": 10, "categoryName": "Groceries"},
                "status": {"statusId": 1, "description": "posted"},
                "account": {
                    "itemAccountId": 10220002,
                    "accountName": "Credit Card",
                    "accountBalance": {"amount": 1044.12, "currencyCode": "USD"},
                },
                "transactionType": "debit",
                "transactionBaseType": "debit",
            },
        ]
    },
}

REGISTER_RESPONSE = {
    "userId": 10483861,
    "emailAddress": "new.user@example.com",
    "loginName": "new.user@example.com",
    "lastLoginTime": 1419839440,
    "loginCount": 0,
    "passwordRecovered": False,
    "userContext": {
        "conversationCredentials": {"sessionToken": "new-user-token"},
        "valid": True,
        "isPasswordExpired": False,
        "cobrandId": 10010352,
        "channelId": -1,
        "locale": "en_US",
        "tncVersion": 2,
        "applicationId": "17CBE222A42161A3FF450E47CF4C1A00",
        "cobrandConversationCredentials": {"sessionToken": COB_TOKEN},
        "preferenceInfo": {
            "currencyCode": "USD",
            "timeZone": "PST",
            "dateFormat": "MM/dd/yyyy",
            "currencyNotationType": {"currencyNotationType": "SYMBOL"},
            "numberFormat": {
                "decimalSeparator": ".",
                "groupingSeparator": ",",
                "groupPattern": "###,##0.##",
            },
        },
    },
}

# Error envelopes as the service sends them
ERROR_INFO_RESPONSE = {
    "errorCode": "415",
    "errorMessage": "Invalid cobrand session token",
    "referenceCode": "_9c8ba1f6-35a2",
    "errorDetail": "Token expired",
}

MULTIPLE_ERROR_RESPONSE = {
    "Error": [
        {"errorDetail": "Invalid User Credentials"},
        {"errorCode": "", "errorMessage": "", "errorDetail": "", "referenceCode": ""},
        {"errorCode": "Y800", "errorDetail": "Account locked"},
    ]
}

ERROR_OCCURRED_RESPONSE = {
    "errorOccurred": "true",
    "exceptionType": "com.yodlee.core.login.InvalidCobrandCredentialsException",
    "referenceCode": "_4f3b6d2e-9a8c",
    "message": "Invalid Cobrand Credentials",
}

# ErrorInfo keys with a numeric errorCode
MISTYPED_ERROR_INFO_RESPONSE = {
    "errorCode": 415,
    "errorMessage": "Invalid cobrand session token",
}
