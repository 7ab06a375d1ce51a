def get_border_sample_script() -> str:
    """JavaScript returning raw border properties for every element."""
    return """
    (() => {
        const rows = [];
        document.querySelectorAll('*').forEach(el => {
            const style = window.getComputedStyle(el);
            rows.push({
                radius: style.borderRadius || '',
                widths: [
                    style.borderTopWidth,
                    style.borderRightWidth,
                    style.borderBottomWidth,
                    style.borderLeftWidth
                ],
                colors: [
                    style.borderTopColor,
                    style.borderRightColor,
                    style.borderBottomColor,
                    style.borderLeftColor
                ],
                shorthand: style.border || ''
            });
        });
        return { elements: rows };
    })()
    """


def get_font_sample_script() -> str:
    """JavaScript returning computed font properties for every element."""
    return """
    (() => {
        const rows = [];
        document.querySelectorAll('*').forEach(el => {
            const style = window.getComputedStyle(el);
            const fontFamily = style.fontFamily;
            if (!fontFamily || fontFamily === 'inherit') return;
            rows.push({
                family: fontFamily,
                size: style.fontSize,
                weight: style.fontWeight,
                style: style.fontStyle,
                tag: el.tagName.toLowerCase(),
                // SVG elements expose className as an object
                class_name: el.getAttribute('class') || '',
                text: (el.textContent || '').substring(0, 100)
            });
        });
        return { elements: rows };
    })()
    """


def get_color_sample_script() -> str:
    """JavaScript returning body/header/footer and button colors."""
    return """
    (() => {
        const BUTTON_SELECTORS = [
            'button', '.button', '.btn',
            'input[type="button"]', 'input[type="submit"]', 'input[type="reset"]',
            '[role="button"]',
            'a.button', 'a.btn', 'a[class*="button"]', 'a[class*="btn"]',
            'div.button', 'div.btn', 'div[class*="button"]', 'div[class*="btn"]',
            'span.button', 'span.btn', 'span[class*="button"]', 'span[class*="btn"]',
            '.cta', '.call-to-action', '.action-button', '.primary-button',
            '.secondary-button', '.submit-button', '.form-button'
        ];

        const pairOf = el => {
            if (!el) return { background: null, foreground: null };
            const style = window.getComputedStyle(el);
            return { background: style.backgroundColor, foreground: style.color };
        };

        const firstMatch = selectors => {
            for (const selector of selectors) {
                const el = document.querySelector(selector);
                if (el) return el;
            }
            return null;
        };

        return {
            body: pairOf(document.body),
            header: pairOf(firstMatch(['header', 'nav', '.header', '#header'])),
            footer: pairOf(firstMatch(['footer', '.footer', '#footer'])),
            buttons: Array.from(document.querySelectorAll(BUTTON_SELECTORS.join(', '))).map(pairOf)
        };
    })()
    """


def get_theme_signal_script() -> str:
    """JavaScript returning the raw evidence for light/dark detection."""
    return """
    (() => {
        const body = document.body;
        const root = document.documentElement;
        const DARK_CLASSES = ['dark', 'dark-theme', 'dark-mode'];
        const hasDark = el => !!el && DARK_CLASSES.some(c => el.classList.contains(c));
        const bodyStyle = body ? window.getComputedStyle(body) : null;
        const rootStyle = window.getComputedStyle(root);
        return {
            body_background: bodyStyle ? bodyStyle.backgroundColor : null,
            root_background: rootStyle.backgroundColor,
            text_color: bodyStyle ? bodyStyle.color : null,
            has_dark_class: hasDark(body) || hasDark(root),
            color_scheme: rootStyle.colorScheme || null,
            prefers_dark: window.matchMedia('(prefers-color-scheme: dark)').matches
        };
    })()
    """
