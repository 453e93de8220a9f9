class LedgerError(ValueError):
    status_code = 400

    def __init__(self, detail: str):
        super().__init__(detail)
        self.detail = detail


class NotAMemberError(LedgerError):
    status_code = 403


class RecipientNotMemberError(LedgerError):
    pass


class SelfPaymentError(LedgerError):
    pass


class OverpaymentError(LedgerError):
    def __init__(self, detail: str, max_amount):
        super().__init__(detail)
        self.max_amount = max_amount
