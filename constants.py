"""
PASSMETER Constants - Single Source of Truth
=============================================

Character sets, weak-password tables and label values shared by the
evaluator, the generator and the presentation layer.

Every table here is immutable and built once at import time.
"""


class CharacterSets:
    """
    Character classes used by both the evaluator and the generator.

    Usage:
        from constants import CharacterSets as CS
        pool = CS.LOWERCASE + CS.DIGITS
    """

    LOWERCASE = "abcdefghijklmnopqrstuvwxyz"
    UPPERCASE = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
    DIGITS    = "0123456789"
    SYMBOLS   = "!@#$%^&*()_+-=[]{}|;:,.<>?"


class RequirementNames:
    """Requirement identifiers, in evaluation order."""
    LENGTH    = "length"
    UPPERCASE = "uppercase"
    LOWERCASE = "lowercase"
    NUMBERS   = "numbers"
    SPECIAL   = "special"

    # Not a requirement: the extra checklist row shown for weak patterns
    PATTERN   = "pattern"

    CHOICES = (LENGTH, UPPERCASE, LOWERCASE, NUMBERS, SPECIAL)

    DESCRIPTIONS = {
        LENGTH:    "At least 8 characters",
        UPPERCASE: "One uppercase letter (A-Z)",
        LOWERCASE: "One lowercase letter (a-z)",
        NUMBERS:   "One number (0-9)",
        SPECIAL:   "One special character (!@#$%...)",
        PATTERN:   "Avoid common patterns (123456, password, etc.)",
    }

    @classmethod
    def describe(cls, name: str) -> str:
        """Get requirement description by name"""
        return cls.DESCRIPTIONS.get(name, name)


class StrengthLevel:
    """Qualitative strength labels, weakest first."""
    VERY_WEAK   = "Very Weak"
    WEAK        = "Weak"
    MEDIUM      = "Medium"
    STRONG      = "Strong"
    VERY_STRONG = "Very Strong"

    CHOICES = (VERY_WEAK, WEAK, MEDIUM, STRONG, VERY_STRONG)

    # score -> level, total over 0..MAX_SCORE
    BY_SCORE = {
        0: VERY_WEAK,
        1: VERY_WEAK,
        2: WEAK,
        3: MEDIUM,
        4: STRONG,
        5: VERY_STRONG,
    }


class PasswordRules:
    """Numeric thresholds of the scoring rules."""
    MIN_LENGTH           = 8
    MAX_SCORE            = 5
    WEAK_PATTERN_PENALTY = 1
    REPEAT_RUN_LENGTH    = 3
    SEQUENCE_RUN_LENGTH  = 3


class GeneratorDefaults:
    """Defaults for generate_password() when config says nothing."""
    LENGTH          = 12
    INCLUDE_SYMBOLS = True
    SECURE_RANDOM   = False


# Known-weak passwords. Matched case-insensitively as substrings.
COMMON_PASSWORDS = (
    "123456",
    "password",
    "123456789",
    "12345678",
    "12345",
    "1234567",
    "1234567890",
    "qwerty",
    "abc123",
    "million2",
    "000000",
    "1234",
    "iloveyou",
    "aaron431",
    "password1",
    "qqww1122",
    "123",
    "omgpop",
    "123321",
    "654321",
    "qwertyuiop",
    "qwer1234",
    "admin",
    "Password",
    "QWERTY",
    "1q2w3e4r",
    "welcome",
    "monkey",
    "dragon",
    "letmein",
    "master",
    "sunshine",
    "princess",
    "azerty",
    "trustno1",
)

# Alphabets scanned for ascending runs ("abc", "789")
SEQUENCE_ALPHABETS = (
    CharacterSets.LOWERCASE,
    CharacterSets.DIGITS,
)

PATTERN_WARNING = "Avoid common patterns"

PASSWORD_TIPS = (
    "Use at least 8 characters",
    "Mix uppercase and lowercase letters",
    "Include numbers and special characters",
    'Avoid common patterns like "123456"',
    "Don't use personal information",
)
