signup_responses = {
    201: {
        "description": "New Signup Recorded",
        "content": {
            "application/json": {
                "examples": {
                    "desktop": {
                        "summary": "Desktop visitor, new email",
                        "value": {
                            "status": "SUCCESS",
                            "status_code": 201,
                            "message": "Email saved! Starting download...",
                            "data": {
                                "email": "user@example.com",
                                "is_new": True,
                                "is_mobile": False,
                                "download_url": "/api/v1/download",
                            },
                        },
                    },
                    "mobile": {
                        "summary": "Mobile visitor, new email",
                        "value": {
                            "status": "SUCCESS",
                            "status_code": 201,
                            "message": "Thanks! We'll let you know when iOS drops.",
                            "data": {
                                "email": "user@example.com",
                                "is_new": True,
                                "is_mobile": True,
                                "download_url": None,
                            },
                        },
                    },
                }
            }
        },
    },
    200: {
        "description": "Email Already On The List",
        "content": {
            "application/json": {
                "examples": {
                    "desktop": {
                        "summary": "Desktop visitor, known email",
                        "value": {
                            "status": "SUCCESS",
                            "status_code": 200,
                            "message": "Welcome back! Starting download...",
                            "data": {
                                "email": "user@example.com",
                                "is_new": False,
                                "is_mobile": False,
                                "download_url": "/api/v1/download",
                            },
                        },
                    }
                }
            }
        },
    },
    422: {
        "description": "Unprocessable Entity - Invalid Email",
        "content": {
            "application/json": {
                "examples": {
                    "invalid_email": {
                        "summary": "Invalid email address",
                        "value": {
                            "error": "VALIDATION_ERROR",
                            "message": "Validation failed",
                            "status_code": 422,
                            "errors": {"email": ["Please enter a valid email address"]},
                        },
                    }
                }
            }
        },
    },
    502: {
        "description": "Signup Store Error",
        "content": {
            "application/json": {
                "examples": {
                    "backend_error": {
                        "summary": "Store rejected the insert",
                        "value": {
                            "error": "BACKEND_ERROR",
                            "message": "Something went wrong. Please try again.",
                            "status_code": 502,
                            "errors": {},
                        },
                    }
                }
            }
        },
    },
    503: {
        "description": "Signup Store Not Configured",
        "content": {
            "application/json": {
                "examples": {
                    "not_configured": {
                        "summary": "Missing store credentials",
                        "value": {
                            "error": "NOT_CONFIGURED",
                            "message": "Something went wrong. Please try again.",
                            "status_code": 503,
                            "errors": {},
                        },
                    }
                }
            }
        },
    },
}

email_exists_responses = {
    200: {
        "description": "Lookup Completed",
        "content": {
            "application/json": {
                "example": {
                    "status": "SUCCESS",
                    "status_code": 200,
                    "message": "Email is on the list",
                    "data": {"email": "user@example.com", "exists": True},
                }
            }
        },
    },
    422: signup_responses[422],
    502: signup_responses[502],
    503: signup_responses[503],
}
