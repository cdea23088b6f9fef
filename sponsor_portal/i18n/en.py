"""English strings."""

translations = {
    "common": {
        "dashboard": "Dashboard",
        "children": "Children",
        "messages": "Messages",
        "sponsorships": "Sponsorships",
        "signIn": "Sign In",
        "signUp": "Sign Up",
        "signOut": "Sign Out",
        "status": "Status",
        "backToHome": "← Back to home",
        "switchLanguage": "Cambiar a Español",
    },

    "nav": {
        "availableChildren": "Available Children",
        "becomeASponsor": "Become a Sponsor",
    },

    # Home
    "home": {
        "heroTitle": "Change a Child's Future Through English Education",
        "heroLocation": "in Quimistán, Honduras",
        "heroSubtitle": (
            "For $35 a month you give a child access to English classes, "
            "learning materials and a mentor who believes in them."
        ),
        "viewChildren": "Meet the Children",
        "createAccount": "Create Account",
        "howItWorksTitle": "How It Works",
        "howItWorksSubtitle": "Sponsoring a child takes a few minutes and lasts a lifetime.",
        "step1Title": "Choose a Child",
        "step1Text": "Browse the children waiting for a sponsor and pick one to support.",
        "step2Title": "Support Their Learning",
        "step2Text": "Your monthly contribution covers tuition, books and academic support.",
        "step3Title": "Stay Connected",
        "step3Text": "Follow their progress and exchange messages reviewed by our staff.",
        "aboutTitle": "About Promesas English Academy",
        "aboutText1": (
            "Promesas English Academy teaches English to children in Quimistán, "
            "Honduras, opening doors to better schools and jobs."
        ),
        "aboutText2": (
            "Every sponsor is matched with one child so that each student has "
            "someone cheering them on."
        ),
        "footerTagline": "Empowering children through English education.",
    },

    # Login / Signup
    "auth": {
        "welcomeBack": "Welcome Back",
        "signInSubtitle": "Sign in to see your sponsored children",
        "emailAddress": "Email Address",
        "password": "Password",
        "signingIn": "Signing in...",
        "dontHaveAccount": "Don't have an account?",
        "joinPromesas": "Join Promesas",
        "signUpSubtitle": "Create an account to sponsor a child",
        "fullName": "Full Name",
        "creatingAccount": "Creating account...",
        "alreadyHaveAccount": "Already have an account?",
        "passwordMinLength": "Password must be at least 6 characters long.",
        "requiredFields": "Please fill in all required fields.",
        "confirmEmail": "Account created! Please confirm your email, then sign in.",
        "signedOut": "You have been signed out.",
        "profileMissing": "Your profile could not be found. Please contact the academy.",
    },

    # Available children
    "children": {
        "waitingTitle": "Children Waiting for a Sponsor",
        "waitingSubtitle": "Each of these children is ready to start learning English with your help.",
        "loadingChildren": "Loading children...",
        "allSponsored": "Every child currently has a sponsor. Please check back soon!",
        "yearsOld": "years old",
        "male": "Boy",
        "female": "Girl",
        "englishLevel": "English Level",
        "sponsorChild": "Sponsor",
        "defaultBio": "This child is eager to learn English and needs your support.",
    },
}
