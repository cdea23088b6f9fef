"""Spanish strings."""

translations = {
    "common": {
        "dashboard": "Panel",
        "children": "Niños",
        "messages": "Mensajes",
        "sponsorships": "Patrocinios",
        "signIn": "Iniciar Sesión",
        "signUp": "Registrarse",
        "signOut": "Cerrar Sesión",
        "status": "Estado",
        "backToHome": "← Volver al inicio",
        "switchLanguage": "Switch to English",
    },

    "nav": {
        "availableChildren": "Niños Disponibles",
        "becomeASponsor": "Hazte Padrino",
    },

    # Inicio
    "home": {
        "heroTitle": "Cambia el Futuro de un Niño con la Educación en Inglés",
        "heroLocation": "en Quimistán, Honduras",
        "heroSubtitle": (
            "Por $35 al mes le das a un niño acceso a clases de inglés, "
            "materiales de estudio y un mentor que cree en él."
        ),
        "viewChildren": "Conoce a los Niños",
        "createAccount": "Crear Cuenta",
        "howItWorksTitle": "Cómo Funciona",
        "howItWorksSubtitle": "Patrocinar a un niño toma unos minutos y dura toda la vida.",
        "step1Title": "Elige un Niño",
        "step1Text": "Explora los niños que esperan un padrino y elige a uno para apoyar.",
        "step2Title": "Apoya su Aprendizaje",
        "step2Text": "Tu aporte mensual cubre matrícula, libros y apoyo académico.",
        "step3Title": "Mantente en Contacto",
        "step3Text": "Sigue su progreso e intercambia mensajes revisados por nuestro personal.",
        "aboutTitle": "Sobre Promesas English Academy",
        "aboutText1": (
            "Promesas English Academy enseña inglés a niños en Quimistán, "
            "Honduras, abriendo puertas a mejores escuelas y empleos."
        ),
        "aboutText2": (
            "Cada padrino se asigna a un niño para que cada estudiante tenga "
            "a alguien que lo apoye."
        ),
        "footerTagline": "Impulsando a los niños a través de la educación en inglés.",
    },

    # Inicio de sesión / Registro
    "auth": {
        "welcomeBack": "Bienvenido de Nuevo",
        "signInSubtitle": "Inicia sesión para ver a tus niños patrocinados",
        "emailAddress": "Correo Electrónico",
        "password": "Contraseña",
        "signingIn": "Iniciando sesión...",
        "dontHaveAccount": "¿No tienes una cuenta?",
        "joinPromesas": "Únete a Promesas",
        "signUpSubtitle": "Crea una cuenta para patrocinar a un niño",
        "fullName": "Nombre Completo",
        "creatingAccount": "Creando cuenta...",
        "alreadyHaveAccount": "¿Ya tienes una cuenta?",
        "passwordMinLength": "La contraseña debe tener al menos 6 caracteres.",
        "requiredFields": "Por favor completa todos los campos obligatorios.",
        "confirmEmail": "¡Cuenta creada! Confirma tu correo y luego inicia sesión.",
        "signedOut": "Has cerrado sesión.",
        "profileMissing": "No se encontró tu perfil. Por favor contacta a la academia.",
    },

    # Niños disponibles
    "children": {
        "waitingTitle": "Niños Esperando un Padrino",
        "waitingSubtitle": "Cada uno de estos niños está listo para aprender inglés con tu ayuda.",
        "loadingChildren": "Cargando niños...",
        "allSponsored": "Todos los niños tienen un padrino. ¡Vuelve pronto!",
        "yearsOld": "años",
        "male": "Niño",
        "female": "Niña",
        "englishLevel": "Nivel de Inglés",
        "sponsorChild": "Patrocinar a",
        "defaultBio": "Este niño tiene muchas ganas de aprender inglés y necesita tu apoyo.",
    },
}
