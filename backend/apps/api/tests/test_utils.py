import unittest
from rest_framework import status
from apps.api.utils import error_response, success_response


class ErrorResponseTests(unittest.TestCase):
    def test_default_status_mapping_and_details(self):
        resp = error_response("NOT_FOUND", "missing", {"id": 1})
        self.assertEqual(resp.status_code, status.HTTP_404_NOT_FOUND)
        self.assertFalse(resp.data["success"])
        self.assertEqual(resp.data["message"], "missing")
        self.assertEqual(resp.data["error"]["code"], "NOT_FOUND")
        self.assertEqual(resp.data["error"]["status"], status.HTTP_404_NOT_FOUND)
        self.assertEqual(resp.data["error"]["details"], {"id": 1})

    def test_domain_codes_map_to_expected_statuses(self):
        self.assertEqual(
            error_response("INSUFFICIENT_STOCK", "no stock").status_code,
            status.HTTP_400_BAD_REQUEST,
        )
        self.assertEqual(
            error_response("INVALID_OWNERSHIP", "not yours").status_code,
            status.HTTP_403_FORBIDDEN,
        )
        self.assertEqual(
            error_response("INVALID_CREDENTIALS", "nope").status_code,
            status.HTTP_401_UNAUTHORIZED,
        )

    def test_unmapped_code_falls_back_to_bad_request(self):
        resp = error_response("CONFLICT", "duplicate")
        self.assertEqual(resp.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(set(resp.data["error"]), {"code", "message", "status"})

    def test_custom_status_override(self):
        resp = error_response("UNKNOWN", "oops", http_status=status.HTTP_202_ACCEPTED)
        self.assertEqual(resp.status_code, status.HTTP_202_ACCEPTED)
        self.assertEqual(resp.data["error"]["message"], "oops")

    def test_blank_message_rejected(self):
        with self.assertRaises(ValueError):
            error_response("NOT_FOUND", "   ")


class SuccessResponseTests(unittest.TestCase):
    def test_envelope_includes_data(self):
        resp = success_response({"id": 3}, "Item added to cart")
        self.assertEqual(resp.status_code, status.HTTP_200_OK)
        self.assertEqual(
            resp.data, {"success": True, "message": "Item added to cart", "data": {"id": 3}}
        )

    def test_envelope_omits_missing_data(self):
        resp = success_response(message="Cart cleared")
        self.assertEqual(resp.data, {"success": True, "message": "Cart cleared"})
