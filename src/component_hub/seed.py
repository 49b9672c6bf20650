"""Built-in sample catalog shown when no catalog file is given.

Previews are small Rich renderables that sketch how each UI entry looks;
logic entries (hooks, providers) have none.
"""

from __future__ import annotations

from rich.console import Group, RenderableType
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from component_hub.models import CatalogEntry, Variant

# ============================================================================
# Previews
# ============================================================================


def _button_preview() -> RenderableType:
    return Text(" Sample Button ", style="bold white on #2563eb")


def _card_preview() -> RenderableType:
    return Panel(
        Text("This is a sample card component with dark styling.", style="#9ca3af"),
        title="Sample Card",
        title_align="left",
        border_style="#374151",
        width=44,
    )


def _input_preview() -> RenderableType:
    return Panel(Text("Sample input field...", style="#9ca3af"), border_style="#374151", width=36)


def _form_preview(heading: str, fields: list[str], submit: str, footer: str) -> RenderableType:
    grid = Table.grid(padding=(0, 0))
    grid.add_column()
    for placeholder in fields:
        grid.add_row(Panel(Text(placeholder, style="#9ca3af"), border_style="#4b5563"))
    grid.add_row(Text(f" {submit} ", style="bold white on #2563eb", justify="center"))
    grid.add_row(Text(footer, style="#60a5fa", justify="center"))
    return Panel(
        Group(Text(heading, style="bold white", justify="center"), grid),
        border_style="#374151",
        width=44,
    )


def _login_preview() -> RenderableType:
    return _form_preview(
        "Sign In",
        ["Email address", "Password"],
        "Sign In",
        "Don't have an account? Sign up",
    )


def _register_preview() -> RenderableType:
    return _form_preview(
        "Create Account",
        ["Full name", "Email address", "Password", "Confirm password"],
        "Create Account",
        "Already have an account? Sign in",
    )


# ============================================================================
# Source text
# ============================================================================

BUTTON_CODE = """import React from 'react';

interface ButtonProps {
  variant?: 'primary' | 'secondary' | 'outline';
  size?: 'sm' | 'md' | 'lg';
  children: React.ReactNode;
  onClick?: () => void;
  disabled?: boolean;
}

export const Button: React.FC<ButtonProps> = ({
  variant = 'primary',
  size = 'md',
  children,
  onClick,
  disabled = false
}) => {
  const baseClasses = 'font-medium rounded-md transition-colors focus:outline-none focus:ring-2';

  const variantClasses = {
    primary: 'bg-blue-600 text-white hover:bg-blue-700 focus:ring-blue-500',
    secondary: 'bg-gray-600 text-white hover:bg-gray-700 focus:ring-gray-500',
    outline: 'border border-gray-300 text-gray-700 hover:bg-gray-50 focus:ring-gray-500'
  };

  const sizeClasses = {
    sm: 'px-3 py-1.5 text-sm',
    md: 'px-4 py-2 text-base',
    lg: 'px-6 py-3 text-lg'
  };

  return (
    <button
      className={`${baseClasses} ${variantClasses[variant]} ${sizeClasses[size]} ${disabled ? 'opacity-50 cursor-not-allowed' : ''}`}
      onClick={onClick}
      disabled={disabled}
    >
      {children}
    </button>
  );
};"""

CARD_CODE = """import React from 'react';

interface CardProps {
  title?: string;
  children: React.ReactNode;
  className?: string;
  onClick?: () => void;
}

export const Card: React.FC<CardProps> = ({
  title,
  children,
  className = '',
  onClick
}) => {
  return (
    <div
      className={`bg-white border border-gray-200 rounded-lg shadow-sm ${className} ${onClick ? 'cursor-pointer hover:shadow-md transition-shadow' : ''}`}
      onClick={onClick}
    >
      {title && (
        <div className="px-4 py-3 border-b border-gray-200">
          <h3 className="text-lg font-medium text-gray-900">{title}</h3>
        </div>
      )}
      <div className="p-4">
        {children}
      </div>
    </div>
  );
};"""

INPUT_CODE = """import React from 'react';

interface InputProps {
  label?: string;
  placeholder?: string;
  value: string;
  onChange: (value: string) => void;
  error?: string;
  type?: 'text' | 'email' | 'password' | 'number';
  required?: boolean;
  disabled?: boolean;
}

export const Input: React.FC<InputProps> = ({
  label,
  placeholder,
  value,
  onChange,
  error,
  type = 'text',
  required = false,
  disabled = false
}) => {
  return (
    <div className="space-y-1">
      {label && (
        <label className="block text-sm font-medium text-gray-700">
          {label}
          {required && <span className="text-red-500 ml-1">*</span>}
        </label>
      )}
      <input
        type={type}
        value={value}
        onChange={(e) => onChange(e.target.value)}
        placeholder={placeholder}
        disabled={disabled}
        className={`w-full px-3 py-2 border rounded-md shadow-sm focus:outline-none focus:ring-2 focus:ring-blue-500 focus:border-blue-500 ${
          error ? 'border-red-300' : 'border-gray-300'
        } ${disabled ? 'bg-gray-100 cursor-not-allowed' : 'bg-white'}`}
      />
      {error && (
        <p className="text-sm text-red-600">{error}</p>
      )}
    </div>
  );
};"""

USE_HYBRID_AUTH_CODE = """import { useState, useEffect, useCallback } from 'react';

interface User {
  id: string;
  email: string;
  name: string;
  provider: 'email' | 'google' | 'github';
}

interface AuthState {
  user: User | null;
  loading: boolean;
  error: string | null;
}

interface UseHybridAuthReturn extends AuthState {
  login: (email: string, password: string) => Promise<void>;
  loginWithGoogle: () => Promise<void>;
  loginWithGithub: () => Promise<void>;
  logout: () => Promise<void>;
  register: (email: string, password: string, name: string) => Promise<void>;
}

export const useHybridAuth = (): UseHybridAuthReturn => {
  const [state, setState] = useState<AuthState>({
    user: null,
    loading: true,
    error: null
  });

  useEffect(() => {
    const checkSession = async () => {
      try {
        const sessionUser = localStorage.getItem('auth_user');
        if (sessionUser) {
          setState(prev => ({ ...prev, user: JSON.parse(sessionUser), loading: false }));
        } else {
          setState(prev => ({ ...prev, loading: false }));
        }
      } catch (error) {
        setState(prev => ({ ...prev, error: 'Session check failed', loading: false }));
      }
    };

    checkSession();
  }, []);

  const login = useCallback(async (email: string, password: string) => {
    setState(prev => ({ ...prev, loading: true, error: null }));
    try {
      const mockUser: User = {
        id: '1',
        email,
        name: email.split('@')[0],
        provider: 'email'
      };
      localStorage.setItem('auth_user', JSON.stringify(mockUser));
      setState(prev => ({ ...prev, user: mockUser, loading: false }));
    } catch (error) {
      setState(prev => ({ ...prev, error: 'Login failed', loading: false }));
    }
  }, []);

  const loginWithGoogle = useCallback(async () => {
    setState(prev => ({ ...prev, loading: true, error: null }));
    try {
      throw new Error('Google login not yet implemented');
    } catch (error) {
      setState(prev => ({ ...prev, error: 'Google login failed', loading: false }));
    }
  }, []);

  const loginWithGithub = useCallback(async () => {
    setState(prev => ({ ...prev, loading: true, error: null }));
    try {
      throw new Error('GitHub login not yet implemented');
    } catch (error) {
      setState(prev => ({ ...prev, error: 'GitHub login failed', loading: false }));
    }
  }, []);

  const logout = useCallback(async () => {
    setState(prev => ({ ...prev, loading: true }));
    try {
      localStorage.removeItem('auth_user');
      setState({ user: null, loading: false, error: null });
    } catch (error) {
      setState(prev => ({ ...prev, error: 'Logout failed', loading: false }));
    }
  }, []);

  const register = useCallback(async (email: string, password: string, name: string) => {
    setState(prev => ({ ...prev, loading: true, error: null }));
    try {
      const mockUser: User = {
        id: Date.now().toString(),
        email,
        name,
        provider: 'email'
      };
      localStorage.setItem('auth_user', JSON.stringify(mockUser));
      setState(prev => ({ ...prev, user: mockUser, loading: false }));
    } catch (error) {
      setState(prev => ({ ...prev, error: 'Registration failed', loading: false }));
    }
  }, []);

  return {
    ...state,
    login,
    loginWithGoogle,
    loginWithGithub,
    logout,
    register
  };
};"""

AUTH_PROVIDER_CODE = """import React, { createContext, useContext, ReactNode } from 'react';
import { useHybridAuth } from '../hooks/useHybridAuth';

interface AuthContextType {
  user: User | null;
  loading: boolean;
  error: string | null;
  login: (email: string, password: string) => Promise<void>;
  loginWithGoogle: () => Promise<void>;
  loginWithGithub: () => Promise<void>;
  logout: () => Promise<void>;
  register: (email: string, password: string, name: string) => Promise<void>;
}

const AuthContext = createContext<AuthContextType | undefined>(undefined);

interface AuthProviderProps {
  children: ReactNode;
}

export const AuthProvider: React.FC<AuthProviderProps> = ({ children }) => {
  const auth = useHybridAuth();

  return (
    <AuthContext.Provider value={auth}>
      {children}
    </AuthContext.Provider>
  );
};

export const useAuth = (): AuthContextType => {
  const context = useContext(AuthContext);
  if (!context) {
    throw new Error('useAuth must be used within an AuthProvider');
  }
  return context;
};"""

FEATURE_FLAG_PROVIDER_CODE = """import React, { createContext, useContext, ReactNode, useState, useEffect } from 'react';

interface FeatureFlags {
  [key: string]: boolean;
}

interface FeatureFlagContextType {
  flags: FeatureFlags;
  isEnabled: (flag: string) => boolean;
  toggleFlag: (flag: string) => void;
  loading: boolean;
}

const FeatureFlagContext = createContext<FeatureFlagContextType | undefined>(undefined);

interface FeatureFlagProviderProps {
  children: ReactNode;
  initialFlags?: FeatureFlags;
}

export const FeatureFlagProvider: React.FC<FeatureFlagProviderProps> = ({
  children,
  initialFlags = {}
}) => {
  const [flags, setFlags] = useState<FeatureFlags>(initialFlags);
  const [loading, setLoading] = useState(true);

  useEffect(() => {
    const loadFeatureFlags = async () => {
      try {
        const mockFlags: FeatureFlags = {
          newDashboard: true,
          betaFeatures: false,
          advancedSearch: true,
          darkMode: true,
          ...initialFlags
        };

        setFlags(mockFlags);
      } catch (error) {
        console.error('Failed to load feature flags:', error);
      } finally {
        setLoading(false);
      }
    };

    loadFeatureFlags();
  }, [initialFlags]);

  const isEnabled = (flag: string): boolean => {
    return Boolean(flags[flag]);
  };

  const toggleFlag = (flag: string): void => {
    setFlags(prev => ({
      ...prev,
      [flag]: !prev[flag]
    }));
  };

  return (
    <FeatureFlagContext.Provider value={{ flags, isEnabled, toggleFlag, loading }}>
      {children}
    </FeatureFlagContext.Provider>
  );
};

export const useFeatureFlags = (): FeatureFlagContextType => {
  const context = useContext(FeatureFlagContext);
  if (!context) {
    throw new Error('useFeatureFlags must be used within a FeatureFlagProvider');
  }
  return context;
};"""

_FORM_FIELD = """            <div>
              <Input
                type="{type}"
                placeholder="{placeholder}"
                value={{{state}}}
                onChange={{(e) => {setter}(e.target.value)}}
                className="bg-gray-700 border-gray-600 text-white placeholder-gray-400"
                required
              />
            </div>
"""


def _auth_page_code(
    component: str,
    fields: list[tuple[str, str, str]],
    heading: str,
    busy_label: str,
    footer: str,
    validation: str = "",
) -> str:
    """Render a sample auth page; fields are (type, placeholder, state) triples."""
    state_lines = "".join(
        f"  const [{state}, set{state[0].upper()}{state[1:]}] = useState('');\n"
        for _, _, state in fields
    )
    field_markup = "\n".join(
        _FORM_FIELD.format(
            type=kind,
            placeholder=placeholder,
            state=state,
            setter=f"set{state[0].upper()}{state[1:]}",
        )
        for kind, placeholder, state in fields
    )
    return f"""import React, {{ useState }} from 'react';
import {{ Button }} from '@/components/ui/button';
import {{ Input }} from '@/components/ui/input';
import {{ Card }} from '@/components/ui/card';

export const {component}: React.FC = () => {{
{state_lines}  const [loading, setLoading] = useState(false);
  const [error, setError] = useState('');

  const handleSubmit = async (e: React.FormEvent) => {{
    e.preventDefault();
    setLoading(true);
    setError('');
{validation}
    try {{
      await new Promise(resolve => setTimeout(resolve, 1000));
    }} catch (err) {{
      setError('{heading} failed');
    }} finally {{
      setLoading(false);
    }}
  }};

  return (
    <div className="min-h-screen flex items-center justify-center bg-gray-900 px-4">
      <Card className="w-full max-w-md bg-gray-800 border-gray-700">
        <div className="p-6">
          <h1 className="text-2xl font-bold text-white mb-6 text-center">
            {heading}
          </h1>

          <form onSubmit={{handleSubmit}} className="space-y-4">
{field_markup}
            {{error && (
              <div className="text-red-400 text-sm text-center">
                {{error}}
              </div>
            )}}

            <Button
              type="submit"
              disabled={{loading}}
              className="w-full bg-blue-600 hover:bg-blue-700"
            >
              {{loading ? '{busy_label}' : '{heading}'}}
            </Button>
          </form>

          <div className="mt-4 text-center">
            <a href="#" className="text-blue-400 hover:text-blue-300 text-sm">
              {footer}
            </a>
          </div>
        </div>
      </Card>
    </div>
  );
}};"""


LOGIN_PAGE_CODE = _auth_page_code(
    "LoginPage",
    [("email", "Email address", "email"), ("password", "Password", "password")],
    "Sign In",
    "Signing in...",
    "Don't have an account? Sign up",
)

REGISTER_PAGE_CODE = _auth_page_code(
    "RegisterPage",
    [
        ("text", "Full name", "name"),
        ("email", "Email address", "email"),
        ("password", "Password", "password"),
        ("password", "Confirm password", "confirmPassword"),
    ],
    "Create Account",
    "Creating account...",
    "Already have an account? Sign in",
    validation="""
    if (password !== confirmPassword) {
      setError('Passwords do not match');
      setLoading(false);
      return;
    }
""",
)


# ============================================================================
# Catalog
# ============================================================================


def build_seed_catalog() -> list[CatalogEntry]:
    """Return the sample catalog in display order."""
    return [
        CatalogEntry(
            id="1",
            name="Button",
            description="Reusable button component with variants and states",
            category="UI",
            tags=("button", "interactive", "form"),
            version="1.2.0",
            file_path="src/components/ui/Button.tsx",
            code=BUTTON_CODE,
            preview=_button_preview,
        ),
        CatalogEntry(
            id="2",
            name="Card",
            description="Flexible card container with header and content areas",
            category="UI",
            tags=("card", "container", "layout"),
            version="1.1.0",
            file_path="src/components/ui/Card.tsx",
            code=CARD_CODE,
            preview=_card_preview,
        ),
        CatalogEntry(
            id="3",
            name="Input",
            description="Form input with validation and error states",
            category="UI",
            tags=("input", "form", "validation"),
            version="1.0.5",
            file_path="src/components/ui/Input.tsx",
            code=INPUT_CODE,
            preview=_input_preview,
        ),
        CatalogEntry(
            id="4",
            name="useHybridAuth",
            description="Custom hook for handling multiple authentication providers",
            category="Hooks",
            tags=("auth", "hook", "state-management"),
            version="2.0.1",
            file_path="src/hooks/useHybridAuth.ts",
            code=USE_HYBRID_AUTH_CODE,
        ),
        CatalogEntry(
            id="5",
            name="AuthProvider",
            description="Context provider for application-wide authentication state",
            category="Providers",
            tags=("auth", "context", "provider"),
            version="1.3.0",
            file_path="src/providers/AuthProvider.tsx",
            code=AUTH_PROVIDER_CODE,
        ),
        CatalogEntry(
            id="6",
            name="FeatureFlagProvider",
            description="Provider for managing feature flags across the application",
            category="Providers",
            tags=("feature-flags", "context", "provider"),
            version="1.1.2",
            file_path="src/providers/FeatureFlagProvider.tsx",
            code=FEATURE_FLAG_PROVIDER_CODE,
        ),
        CatalogEntry(
            id="7",
            name="Authentication Pages",
            description="Complete authentication flow with login and register pages",
            category="Pages",
            tags=("auth", "pages", "forms"),
            version="1.0.0",
            file_path="src/pages/auth/",
            code="// See individual page components for complete implementation",
            variants=(
                Variant(
                    name="Login Page",
                    file_path="src/pages/auth/LoginPage.tsx",
                    code=LOGIN_PAGE_CODE,
                    preview=_login_preview,
                ),
                Variant(
                    name="Register Page",
                    file_path="src/pages/auth/RegisterPage.tsx",
                    code=REGISTER_PAGE_CODE,
                    preview=_register_preview,
                ),
            ),
        ),
    ]


__all__ = ["build_seed_catalog"]
